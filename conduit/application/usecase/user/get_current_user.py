"""Get current user use case."""

from pydantic import BaseModel

from conduit.application.view import project_auth_session
from conduit.domain.service import AuthService

from .register_user import UserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT from the Authorization header


class GetCurrentUserUseCase:
    """Use case for reading the session's own account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Resolve the token and return its user, echoing the same token.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
        """
        user = await self.auth_service.resolve_user(request.token)
        return UserResponse(user=project_auth_session(user, request.token or ""))
