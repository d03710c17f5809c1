"""Domain model entities for Conduit."""

from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.model.user import User

__all__ = [
    "User",
    "Article",
    "Comment",
]
