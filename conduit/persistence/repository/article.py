"""PostgreSQL implementation of Article repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Article
from conduit.domain.repository import ArticleQuery, ArticleRepository
from conduit.domain.value import ArticleId, Page, Slug
from conduit.persistence.mappers import article_to_dict, row_to_article
from conduit.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_query(stmt, query: ArticleQuery):
        """Add the WHERE clauses for an article query to a statement."""
        if query.tag is not None:
            stmt = stmt.where(articles_table.c.tag_list.any(query.tag))
        if query.author_ids is not None:
            stmt = stmt.where(articles_table.c.author_id.in_(list(query.author_ids)))
        if query.article_ids is not None:
            stmt = stmt.where(articles_table.c.id.in_(list(query.article_ids)))
        return stmt

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        with logfire.span("article_repository.find_by_slug", slug=str(slug)):
            stmt = select(articles_table).where(articles_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_article(row._asdict()) if row else None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is already used by any article."""
        stmt = (
            select(func.count())
            .select_from(articles_table)
            .where(articles_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_all(self, query: ArticleQuery, page: Page) -> List[Article]:
        """Find articles matching a query, newest first, one page at a time."""
        with logfire.span(
            "article_repository.find_all",
            tag=query.tag,
            limit=page.limit,
            offset=page.offset,
        ):
            stmt = self._apply_query(select(articles_table), query)
            stmt = stmt.order_by(desc(articles_table.c.created_at))
            if page.limit:
                stmt = stmt.limit(page.limit)
            stmt = stmt.offset(page.offset)

            result = await self.session.execute(stmt)
            return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def count(self, query: ArticleQuery) -> int:
        """Count articles matching a query."""
        stmt = self._apply_query(
            select(func.count()).select_from(articles_table), query
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        with logfire.span("article_repository.save", article_id=str(article.id)):
            existing = await self.find_by_id(article.id)
            article_dict = article_to_dict(article)

            if existing:
                stmt = (
                    articles_table.update()
                    .where(articles_table.c.id == article.id)
                    .values(**article_dict)
                )
            else:
                stmt = articles_table.insert().values(**article_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article."""
        await self.session.execute(
            delete(articles_table).where(articles_table.c.id == article_id)
        )
        await self.session.flush()

    async def find_distinct_tags(self) -> List[str]:
        """Find every distinct tag across all articles, sorted."""
        tag = func.unnest(articles_table.c.tag_list).label("tag")
        subquery = select(tag).subquery()
        stmt = select(subquery.c.tag).distinct().order_by(subquery.c.tag)
        result = await self.session.execute(stmt)
        return [row.tag for row in result.fetchall()]
