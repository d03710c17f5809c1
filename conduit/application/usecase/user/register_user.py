"""Register user use case."""

import logfire
from pydantic import BaseModel

from conduit.application.view import AuthView, View, project_auth_session
from conduit.domain.service import AuthService, UserService


class RegisterUserRequest(BaseModel):
    """Register user request.

    Fields default to empty so that missing ones are reported as blank by
    the domain, together with any other problems.
    """

    username: str = ""
    email: str = ""
    password: str = ""


class UserResponse(View):
    """Response wrapping the signed-in user."""

    user: AuthView


class RegisterUserUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            auth_service: Authentication domain service
        """
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: RegisterUserRequest) -> UserResponse:
        """Execute registration flow.

        Steps:
        1. Validate and create the user (via UserService)
        2. Issue a session token (via AuthService)

        Args:
            request: Registration data

        Returns:
            The new user with a session token

        Raises:
            ValidationFailedError: If any field is blank, malformed or taken
        """
        with logfire.span("register_user.execute", username=request.username):
            user = await self.user_service.register(
                request.username, request.email, request.password
            )
            token = self.auth_service.issue_token(user)
            return UserResponse(user=project_auth_session(user, token))
