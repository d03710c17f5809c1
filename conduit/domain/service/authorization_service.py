"""Authorization guard for article and comment mutations."""

import logfire

from conduit.domain.error import NotAuthorizedError

from .base import Service


class AuthorizationService(Service):
    """Decides whether an acting user may modify a resource.

    Ownership is the only rule: the acting user must be the resource's
    author. Identifiers are compared as strings so a UUID and its text
    form are treated as the same identity.
    """

    @staticmethod
    def can_modify(acting_user_id: object, resource_author_id: object) -> bool:
        """Return True if the acting user authored the resource."""
        return str(acting_user_id) == str(resource_author_id)

    def ensure_can_modify(
        self,
        acting_user_id: object,
        resource_author_id: object,
        resource: str,
        resource_id: str,
    ) -> None:
        """Raise unless the acting user authored the resource.

        Called before any store mutation, so a denial leaves no partial writes.

        Raises:
            NotAuthorizedError: If the acting user is not the author
        """
        if not self.can_modify(acting_user_id, resource_author_id):
            logfire.warn(
                "Modification denied",
                resource=resource,
                resource_id=resource_id,
                user_id=str(acting_user_id),
            )
            raise NotAuthorizedError(resource, resource_id, str(acting_user_id))
