"""Domain value objects for Conduit."""

from conduit.domain.value.identifiers import ArticleId, CommentId, UserId
from conduit.domain.value.types import (
    DEFAULT_PAGE_LIMIT,
    Email,
    Page,
    Slug,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "Username",
    "Email",
    "Slug",
    "Page",
    "DEFAULT_PAGE_LIMIT",
]
