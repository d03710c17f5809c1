"""User repository interface (the identity store)."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from conduit.domain.model.user import User
from conduit.domain.value import ArticleId, Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations, including the
    set-valued ``favorites`` and ``following`` fields.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users at once (batch query, avoids N+1).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their (lower-cased) username.

        Args:
            username: The username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (lower-cased) email.

        Args:
            email: The email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), including favorites and following.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def count_favoriting(self, article_id: ArticleId) -> int:
        """Count users whose favorites contain the given article.

        Args:
            article_id: The article ID

        Returns:
            Number of users that favorited the article
        """
        pass
