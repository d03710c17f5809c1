"""Viewer-relative representations of domain entities.

The views are what the API returns. Field names are snake_case in
Python and camelCase on the wire. Flags such as ``favorited`` and
``following`` depend on who is looking and are False for anonymous
viewers.
"""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from conduit.domain.model import Article, Comment, User
from conduit.domain.repository import UserRepository
from conduit.domain.service import SocialGraphService
from conduit.domain.value import UserId

DEFAULT_IMAGE = "http://static.productionready.io/images/smiley-cyrus.jpg"


class View(BaseModel):
    """Base class for API views."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ProfileView(View):
    """Public profile of a user as seen by a viewer."""

    username: str
    bio: Optional[str] = None
    image: str
    following: bool = False


class ArticleView(View):
    """Article as seen by a viewer, with its author's profile."""

    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str]
    created_at: datetime
    updated_at: datetime
    favorited: bool = False
    favorites_count: int
    author: ProfileView


class CommentView(View):
    """Comment as seen by a viewer, with its author's profile."""

    id: str
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileView


class AuthView(View):
    """The signed-in user together with their session token."""

    username: str
    email: str
    bio: Optional[str] = None
    image: Optional[str] = None
    token: str


def project_profile(user: User, viewer: Optional[User] = None) -> ProfileView:
    """Project a user into a profile view."""
    return ProfileView(
        username=user.username.root,
        bio=user.bio,
        image=user.image or DEFAULT_IMAGE,
        following=SocialGraphService.is_following(viewer, user.id),
    )


def project_article(
    article: Article, author: User, viewer: Optional[User] = None
) -> ArticleView:
    """Project an article and its author into an article view.

    Args:
        article: The article
        author: The article's author
        viewer: Who is looking, None when anonymous

    Returns:
        The article view
    """
    return ArticleView(
        slug=article.slug.root,
        title=article.title,
        description=article.description,
        body=article.body,
        tag_list=list(article.tag_list),
        created_at=article.created_at,
        updated_at=article.updated_at,
        favorited=SocialGraphService.is_favorite(viewer, article.id),
        favorites_count=article.favorites_count,
        author=project_profile(author, viewer),
    )


def project_comment(
    comment: Comment, author: User, viewer: Optional[User] = None
) -> CommentView:
    """Project a comment and its author into a comment view."""
    return CommentView(
        id=str(comment.id),
        body=comment.body,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        author=project_profile(author, viewer),
    )


def project_auth_session(user: User, token: str) -> AuthView:
    """Project a user and an issued token into an auth view."""
    return AuthView(
        username=user.username.root,
        email=user.email.root,
        bio=user.bio,
        image=user.image,
        token=token,
    )


async def load_authors(
    user_repository: UserRepository, author_ids: Iterable[UserId]
) -> dict[UserId, User]:
    """Fetch the authors of several items in one query, keyed by ID."""
    users = await user_repository.find_by_ids(set(author_ids))
    return {user.id: user for user in users}
