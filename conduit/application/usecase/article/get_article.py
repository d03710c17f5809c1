"""Get article use case."""

from pydantic import BaseModel

from conduit.application.view import project_article
from conduit.domain.service import ArticleService, AuthService, UserService

from .create_article import ArticleResponse


class GetArticleRequest(BaseModel):
    """Get article request."""

    slug: str
    token: str | None = None  # Optional viewer


class GetArticleUseCase:
    """Use case for reading one article by slug."""

    def __init__(
        self,
        auth_service: AuthService,
        article_service: ArticleService,
        user_service: UserService,
    ) -> None:
        """Initialize get article use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: GetArticleRequest) -> ArticleResponse:
        """Return the article as seen by the (possibly anonymous) viewer.

        Raises:
            NotFoundError: If the slug does not resolve
        """
        viewer = await self.auth_service.resolve_viewer(request.token)
        article = await self.article_service.get_by_slug(request.slug)
        author = await self.user_service.get_by_id(article.author_id)
        return ArticleResponse(article=project_article(article, author, viewer))
