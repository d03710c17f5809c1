"""Comment repository interface (the content store, comments side)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from conduit.domain.model.comment import Comment
from conduit.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments on an article, newest first.

        Args:
            article_id: The article ID

        Returns:
            Comments sorted by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_article(self, article_id: ArticleId) -> int:
        """Delete every comment on an article.

        Args:
            article_id: The article ID

        Returns:
            Number of comments deleted
        """
        pass
