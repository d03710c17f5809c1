"""Get profile use case."""

from pydantic import BaseModel

from conduit.application.view import ProfileView, View, project_profile
from conduit.domain.service import AuthService, UserService


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str
    token: str | None = None  # Optional viewer


class ProfileResponse(View):
    """Response wrapping a profile."""

    profile: ProfileView


class GetProfileUseCase:
    """Use case for reading a user's public profile."""

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Return the profile as seen by the (possibly anonymous) viewer.

        Raises:
            NotFoundError: If the username does not resolve
            NotAuthenticatedError: If a token was sent but is invalid
        """
        viewer = await self.auth_service.resolve_viewer(request.token)
        user = await self.user_service.get_by_username(request.username)
        return ProfileResponse(profile=project_profile(user, viewer))
