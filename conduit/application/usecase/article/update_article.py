"""Update article use case."""

from typing import Optional

from pydantic import BaseModel

from conduit.application.view import project_article
from conduit.domain.service import ArticleService, AuthService

from .create_article import ArticleResponse


class UpdateArticleRequest(BaseModel):
    """Update article request.

    Only fields that were sent are applied. The slug is fixed at creation.
    """

    slug: str
    token: str | None = None
    title: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None
    tag_list: Optional[list[str]] = None


class UpdateArticleUseCase:
    """Use case for editing an article."""

    def __init__(
        self, auth_service: AuthService, article_service: ArticleService
    ) -> None:
        """Initialize update article use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service

    async def execute(self, request: UpdateArticleRequest) -> ArticleResponse:
        """Execute update article flow.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the slug does not resolve
            NotAuthorizedError: If the actor is not the author
            ValidationFailedError: If a text field is set to blank
        """
        actor = await self.auth_service.resolve_user(request.token)
        article = await self.article_service.get_by_slug(request.slug)
        changes = request.model_dump(exclude_unset=True, exclude={"slug", "token"})
        updated = await self.article_service.update_article(actor, article, changes)
        # Only the author gets this far, so the actor is the author.
        return ArticleResponse(article=project_article(updated, actor, actor))
