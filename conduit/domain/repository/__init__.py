"""Repository interfaces for Conduit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from conduit.domain.repository.article import ArticleQuery, ArticleRepository
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ArticleRepository",
    "ArticleQuery",
    "CommentRepository",
]
