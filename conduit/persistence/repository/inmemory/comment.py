"""In-memory comment repository for testing."""

from typing import List, Optional

from conduit.domain.model.comment import Comment
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments on an article, newest first."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_article(self, article_id: ArticleId) -> int:
        """Delete every comment on an article."""
        doomed = [cid for cid, c in self._comments.items() if c.article_id == article_id]
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
