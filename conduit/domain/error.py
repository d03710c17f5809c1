"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationFailedError(DomainError):
    """One or more fields violate a shape or uniqueness constraint.

    ``errors`` maps the field name to a short message, e.g.
    ``{"username": "is already taken"}``.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field} {message}" for field, message in errors.items())
        )


class NotAuthenticatedError(DomainError):
    """Raised when a protected operation has no resolvable identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
