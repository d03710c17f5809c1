"""Feed use case."""

from pydantic import BaseModel, Field

from conduit.domain.repository import UserRepository
from conduit.domain.service import AuthService, FeedService
from conduit.domain.value import DEFAULT_PAGE_LIMIT, Page

from .list_articles import MultipleArticlesResponse, project_articles


class FeedArticlesRequest(BaseModel):
    """Feed request."""

    token: str | None = None
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)


class FeedArticlesUseCase:
    """Use case for the personal feed of followed authors."""

    def __init__(
        self,
        auth_service: AuthService,
        feed_service: FeedService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize feed use case.

        Args:
            auth_service: Authentication domain service
            feed_service: Feed composition domain service
            user_repository: User repository (batch author lookup)
        """
        self.auth_service = auth_service
        self.feed_service = feed_service
        self.user_repository = user_repository

    async def execute(self, request: FeedArticlesRequest) -> MultipleArticlesResponse:
        """Return articles by the authors the viewer follows, newest first.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
        """
        viewer = await self.auth_service.resolve_user(request.token)
        articles, total = await self.feed_service.feed(
            viewer, Page(limit=request.limit, offset=request.offset)
        )
        return await project_articles(self.user_repository, articles, total, viewer)
