"""Login use case."""

import logfire
from pydantic import BaseModel

from conduit.application.view import project_auth_session
from conduit.domain.service import AuthService

from .register_user import UserResponse


class LoginUserRequest(BaseModel):
    """Login request."""

    email: str = ""
    password: str = ""


class LoginUserUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginUserRequest) -> UserResponse:
        """Execute login flow.

        Args:
            request: Credentials

        Returns:
            The user with a freshly issued token

        Raises:
            ValidationFailedError: If a field is blank or the credentials
                do not match
        """
        with logfire.span("login_user.execute"):
            user = await self.auth_service.authenticate(
                request.email, request.password
            )
            token = self.auth_service.issue_token(user)
            return UserResponse(user=project_auth_session(user, token))
