"""Delete article use case."""

from pydantic import BaseModel

from conduit.domain.service import ArticleService, AuthService


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    slug: str
    token: str | None = None


class DeleteArticleUseCase:
    """Use case for deleting an article and its comments."""

    def __init__(
        self, auth_service: AuthService, article_service: ArticleService
    ) -> None:
        """Initialize delete article use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> None:
        """Execute delete article flow.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the slug does not resolve
            NotAuthorizedError: If the actor is not the author
        """
        actor = await self.auth_service.resolve_user(request.token)
        article = await self.article_service.get_by_slug(request.slug)
        await self.article_service.delete_article(actor, article)
