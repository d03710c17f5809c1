"""User aggregate root.

Users author articles and comments and form the social graph:
``following`` points at other users, ``favorites`` at articles.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, Email, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``favorites`` and ``following`` are sets: membership is what matters,
    duplicates collapse and there is no ordering. They are only changed
    through the social graph service.
    """

    id: UserId
    username: Username
    email: Email
    bio: Optional[str] = None
    image: Optional[str] = None
    password_salt: str = Field(repr=False)
    password_digest: str = Field(repr=False)
    favorites: frozenset[ArticleId] = frozenset()
    following: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
