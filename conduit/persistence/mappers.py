"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from conduit.domain.model import Article, Comment, User
from conduit.domain.value import (
    ArticleId,
    CommentId,
    Email,
    Slug,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    favorites: Iterable[Any] = (),
    following: Iterable[Any] = (),
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        favorites: Article IDs from the user_favorites table
        following: User IDs from the user_follows table

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        bio=row.get("bio"),
        image=row.get("image"),
        password_salt=row["password_salt"],
        password_digest=row["password_digest"],
        favorites=frozenset(ArticleId(_uuid(a)) for a in favorites),
        following=frozenset(UserId(_uuid(u)) for u in following),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users-table dict.

    The set-valued fields live in their own tables and are left out.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "bio": user.bio,
        "image": user.image,
        "password_salt": user.password_salt,
        "password_digest": user.password_digest,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row["description"],
        body=row["body"],
        tag_list=list(row.get("tag_list") or []),
        author_id=UserId(_uuid(row["author_id"])),
        comment_ids=[CommentId(_uuid(c)) for c in row.get("comment_ids") or []],
        favorites_count=row["favorites_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": article.id,
        "slug": article.slug.root,
        "title": article.title,
        "description": article.description,
        "body": article.body,
        "tag_list": list(article.tag_list),
        "author_id": article.author_id,
        "comment_ids": list(article.comment_ids),
        "favorites_count": article.favorites_count,
        "created_at": article.created_at,
        "updated_at": article.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
