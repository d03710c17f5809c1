"""In-memory article repository for testing."""

from typing import List, Optional

from conduit.domain.model.article import Article
from conduit.domain.repository.article import ArticleQuery, ArticleRepository
from conduit.domain.value import ArticleId, Page, Slug


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    def _matching(self, query: ArticleQuery) -> List[Article]:
        return [a for a in self._articles.values() if query.matches(a)]

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._articles.values():
            if article.slug == slug:
                return article
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is in use."""
        return any(a.slug == slug for a in self._articles.values())

    async def find_all(self, query: ArticleQuery, page: Page) -> List[Article]:
        """Find articles matching a query, newest first."""
        articles = sorted(
            self._matching(query), key=lambda a: a.created_at, reverse=True
        )
        return page.apply(articles)

    async def count(self, query: ArticleQuery) -> int:
        """Count articles matching a query."""
        return len(self._matching(query))

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article."""
        self._articles.pop(article_id, None)

    async def find_distinct_tags(self) -> List[str]:
        """Find every distinct tag, sorted."""
        return sorted({tag for a in self._articles.values() for tag in a.tag_list})
