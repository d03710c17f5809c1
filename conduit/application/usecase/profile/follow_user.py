"""Follow user use case."""

import logfire
from pydantic import BaseModel

from conduit.application.view import project_profile
from conduit.domain.service import AuthService, SocialGraphService, UserService

from .get_profile import ProfileResponse


class FollowUserRequest(BaseModel):
    """Follow user request."""

    username: str
    token: str | None = None


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        social_graph_service: SocialGraphService,
    ) -> None:
        """Initialize follow user use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
            social_graph_service: Social graph domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.social_graph_service = social_graph_service

    async def execute(self, request: FollowUserRequest) -> ProfileResponse:
        """Execute follow flow.

        Steps:
        1. Resolve the acting user
        2. Resolve the target by username
        3. Add the target to the actor's following set

        Returns:
            The target's profile, now with ``following`` set

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the username does not resolve
        """
        viewer = await self.auth_service.resolve_user(request.token)
        target = await self.user_service.get_by_username(request.username)

        with logfire.span(
            "follow_user.execute", user_id=str(viewer.id), target=request.username
        ):
            viewer = await self.social_graph_service.follow(viewer, target)
            if viewer.id == target.id:
                target = viewer
            return ProfileResponse(profile=project_profile(target, viewer))
