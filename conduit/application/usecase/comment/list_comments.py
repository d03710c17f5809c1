"""List comments use case."""

from pydantic import BaseModel

from conduit.application.view import CommentView, View, load_authors, project_comment
from conduit.domain.repository import UserRepository
from conduit.domain.service import ArticleService, AuthService, CommentService


class ListCommentsRequest(BaseModel):
    """List comments request."""

    slug: str
    token: str | None = None  # Optional viewer


class MultipleCommentsResponse(View):
    """Response wrapping an article's comments."""

    comments: list[CommentView]


class ListCommentsUseCase:
    """Use case for reading an article's comments."""

    def __init__(
        self,
        auth_service: AuthService,
        article_service: ArticleService,
        comment_service: CommentService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize list comments use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
            comment_service: Comment domain service
            user_repository: User repository (batch author lookup)
        """
        self.auth_service = auth_service
        self.article_service = article_service
        self.comment_service = comment_service
        self.user_repository = user_repository

    async def execute(self, request: ListCommentsRequest) -> MultipleCommentsResponse:
        """Return the article's comments newest first, each with its author.

        Raises:
            NotFoundError: If the slug does not resolve
        """
        viewer = await self.auth_service.resolve_viewer(request.token)
        article = await self.article_service.get_by_slug(request.slug)
        comments = await self.comment_service.list_for_article(article)
        authors = await load_authors(
            self.user_repository, (c.author_id for c in comments)
        )
        return MultipleCommentsResponse(
            comments=[
                project_comment(comment, authors[comment.author_id], viewer)
                for comment in comments
                if comment.author_id in authors
            ]
        )
