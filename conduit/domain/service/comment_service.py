"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from conduit.domain.error import NotFoundError, ValidationFailedError
from conduit.domain.model import Article, Comment, User
from conduit.domain.repository import ArticleRepository, CommentRepository
from conduit.domain.value import CommentId

from .authorization_service import AuthorizationService
from .base import Service
from .user_service import BLANK


class CommentService(Service):
    """Domain service for comment operations.

    A comment lives in the comment store and is also referenced from its
    article's ``comment_ids``. Both sides are kept in step here.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository
            authorization_service: Ownership guard
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.authorization_service = authorization_service

    async def add_comment(self, author: User, article: Article, body: str) -> Comment:
        """Add a comment to an article.

        Args:
            author: Commenting user
            article: Target article
            body: Comment text

        Returns:
            Created comment

        Raises:
            ValidationFailedError: If the body is blank
        """
        with logfire.span(
            "comment_service.add_comment",
            article_id=str(article.id),
            author_id=str(author.id),
        ):
            if not body:
                raise ValidationFailedError({"body": BLANK})

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                body=body,
                author_id=author.id,
                article_id=article.id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            await self.article_repository.save(
                article.model_copy(
                    update={"comment_ids": [*article.comment_ids, saved.id]}
                )
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article.id),
            )
            return saved

    async def list_for_article(self, article: Article) -> list[Comment]:
        """List an article's comments, newest first."""
        with logfire.span(
            "comment_service.list_for_article", article_id=str(article.id)
        ):
            comments = await self.comment_repository.find_by_article(article.id)
            logfire.info(
                "Comments retrieved", article_id=str(article.id), count=len(comments)
            )
            return comments

    async def delete_comment(
        self, actor: User, article: Article, comment_id: str
    ) -> None:
        """Delete a comment from an article.

        Args:
            actor: Acting user
            article: Article the comment should belong to
            comment_id: Comment ID as it appears in the URL

        Raises:
            NotFoundError: If the comment does not exist on this article
            NotAuthorizedError: If the actor is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            article_id=str(article.id),
            comment_id=comment_id,
            actor_id=str(actor.id),
        ):
            comment = await self._find_on_article(article, comment_id)
            self.authorization_service.ensure_can_modify(
                actor.id, comment.author_id, "comment", comment_id
            )

            await self.article_repository.save(
                article.model_copy(
                    update={
                        "comment_ids": [
                            cid for cid in article.comment_ids if cid != comment.id
                        ]
                    }
                )
            )
            await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted", comment_id=comment_id, article_id=str(article.id)
            )

    async def _find_on_article(self, article: Article, comment_id: str) -> Comment:
        try:
            parsed = CommentId(UUID(comment_id))
        except ValueError:
            raise NotFoundError("Comment", comment_id)
        comment = await self.comment_repository.find_by_id(parsed)
        if comment is None or comment.article_id != article.id:
            logfire.warn(
                "Comment not found on article",
                comment_id=comment_id,
                article_id=str(article.id),
            )
            raise NotFoundError("Comment", comment_id)
        return comment
