"""Delete comment use case."""

from pydantic import BaseModel

from conduit.domain.service import ArticleService, AuthService, CommentService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    slug: str
    comment_id: str
    token: str | None = None


class DeleteCommentUseCase:
    """Use case for deleting one's own comment."""

    def __init__(
        self,
        auth_service: AuthService,
        article_service: ArticleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the article or the comment does not resolve
            NotAuthorizedError: If the actor did not write the comment
        """
        actor = await self.auth_service.resolve_user(request.token)
        article = await self.article_service.get_by_slug(request.slug)
        await self.comment_service.delete_comment(actor, article, request.comment_id)
