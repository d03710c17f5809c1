"""Create article use case."""

import logfire
from pydantic import BaseModel, Field

from conduit.application.view import ArticleView, View, project_article
from conduit.domain.service import ArticleService, AuthService


class CreateArticleRequest(BaseModel):
    """Create article request."""

    token: str | None = None
    title: str = ""
    description: str = ""
    body: str = ""
    tag_list: list[str] = Field(default_factory=list)


class ArticleResponse(View):
    """Response wrapping a single article."""

    article: ArticleView


class CreateArticleUseCase:
    """Use case for publishing a new article."""

    def __init__(
        self, auth_service: AuthService, article_service: ArticleService
    ) -> None:
        """Initialize create article use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service

    async def execute(self, request: CreateArticleRequest) -> ArticleResponse:
        """Execute create article flow.

        Steps:
        1. Resolve the author from the token
        2. Create the article, deriving its slug (via ArticleService)
        3. Project it for the author

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            ValidationFailedError: If a field is blank or the slug is taken
        """
        author = await self.auth_service.resolve_user(request.token)

        with logfire.span(
            "create_article.execute", author_id=str(author.id), title=request.title
        ):
            article = await self.article_service.create_article(
                author,
                title=request.title,
                description=request.description,
                body=request.body,
                tag_list=request.tag_list,
            )
            return ArticleResponse(article=project_article(article, author, author))
