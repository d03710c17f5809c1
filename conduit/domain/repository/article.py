"""Article repository interface (the content store, articles side)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from conduit.domain.model.article import Article
from conduit.domain.value import ArticleId, Page, Slug, UserId
from conduit.domain.value.common import ValueObject


class ArticleQuery(ValueObject):
    """Filter for article listings.

    Each restriction is independent. For the set-valued ones, ``None``
    means "no restriction" while an empty set means "nothing matches",
    which is how a filter on a user that does not exist is expressed.
    """

    tag: Optional[str] = None
    author_ids: Optional[frozenset[UserId]] = None
    article_ids: Optional[frozenset[ArticleId]] = None

    @property
    def matches_nothing(self) -> bool:
        """Whether a restriction rules out every article."""
        return self.author_ids == frozenset() or self.article_ids == frozenset()

    def matches(self, article: Article) -> bool:
        """Check a single article against the filter."""
        if self.tag is not None and self.tag not in article.tag_list:
            return False
        if self.author_ids is not None and article.author_id not in self.author_ids:
            return False
        if self.article_ids is not None and article.id not in self.article_ids:
            return False
        return True


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already in use."""
        pass

    @abstractmethod
    async def find_all(self, query: ArticleQuery, page: Page) -> List[Article]:
        """Find articles matching a query, newest first.

        Args:
            query: Filter to apply
            page: Pagination window

        Returns:
            Articles sorted by created_at descending
        """
        pass

    @abstractmethod
    async def count(self, query: ArticleQuery) -> int:
        """Count articles matching a query, ignoring pagination.

        Args:
            query: Filter to apply

        Returns:
            Total number of matching articles
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article (hard delete).

        Args:
            article_id: The article ID to delete
        """
        pass

    @abstractmethod
    async def find_distinct_tags(self) -> List[str]:
        """Find every distinct tag used by any article, sorted by name."""
        pass
