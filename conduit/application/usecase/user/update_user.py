"""Update user use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from conduit.application.view import project_auth_session
from conduit.domain.service import AuthService, UserService

from .register_user import UserResponse


class UpdateUserRequest(BaseModel):
    """Update user request.

    Only fields that were actually sent are applied; ``bio`` and ``image``
    may be sent as null to clear them.
    """

    token: str | None = None
    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    password: Optional[str] = None


class UpdateUserUseCase:
    """Use case for editing the signed-in user's account."""

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update flow.

        Steps:
        1. Resolve the acting user from the token
        2. Apply the sent fields (via UserService)
        3. Return the updated account with the same token

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            ValidationFailedError: If a sent field is invalid or taken
        """
        user = await self.auth_service.resolve_user(request.token)
        changes = request.model_dump(exclude_unset=True, exclude={"token"})

        with logfire.span(
            "update_user.execute", user_id=str(user.id), fields=sorted(changes)
        ):
            updated = await self.user_service.update_user(user, changes)
            return UserResponse(user=project_auth_session(updated, request.token or ""))
