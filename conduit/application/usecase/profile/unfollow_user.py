"""Unfollow user use case."""

import logfire
from pydantic import BaseModel

from conduit.application.view import project_profile
from conduit.domain.service import AuthService, SocialGraphService, UserService

from .get_profile import ProfileResponse


class UnfollowUserRequest(BaseModel):
    """Unfollow user request."""

    username: str
    token: str | None = None


class UnfollowUserUseCase:
    """Use case for no longer following a user."""

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        social_graph_service: SocialGraphService,
    ) -> None:
        """Initialize unfollow user use case.

        Args:
            auth_service: Authentication domain service
            user_service: User domain service
            social_graph_service: Social graph domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.social_graph_service = social_graph_service

    async def execute(self, request: UnfollowUserRequest) -> ProfileResponse:
        """Remove the target from the actor's following set.

        Unfollowing someone who was not followed succeeds.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the username does not resolve
        """
        viewer = await self.auth_service.resolve_user(request.token)
        target = await self.user_service.get_by_username(request.username)

        with logfire.span(
            "unfollow_user.execute", user_id=str(viewer.id), target=request.username
        ):
            viewer = await self.social_graph_service.unfollow(viewer, target)
            if viewer.id == target.id:
                target = viewer
            return ProfileResponse(profile=project_profile(target, viewer))
