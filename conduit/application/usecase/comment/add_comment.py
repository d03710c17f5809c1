"""Add comment use case."""

import logfire
from pydantic import BaseModel

from conduit.application.view import CommentView, View, project_comment
from conduit.domain.service import ArticleService, AuthService, CommentService


class AddCommentRequest(BaseModel):
    """Add comment request."""

    slug: str
    token: str | None = None
    body: str = ""


class CommentResponse(View):
    """Response wrapping a single comment."""

    comment: CommentView


class AddCommentUseCase:
    """Use case for commenting on an article."""

    def __init__(
        self,
        auth_service: AuthService,
        article_service: ArticleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the slug does not resolve
            ValidationFailedError: If the body is blank
        """
        author = await self.auth_service.resolve_user(request.token)
        article = await self.article_service.get_by_slug(request.slug)

        with logfire.span(
            "add_comment.execute", author_id=str(author.id), slug=request.slug
        ):
            comment = await self.comment_service.add_comment(
                author, article, request.body
            )
            return CommentResponse(comment=project_comment(comment, author, author))
