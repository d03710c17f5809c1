"""Feed composition: filtered, paginated and personalized article listings."""

from typing import Optional

import logfire
from pydantic import ValidationError

from conduit.domain.model import Article, User
from conduit.domain.repository import (
    ArticleQuery,
    ArticleRepository,
    UserRepository,
)
from conduit.domain.value import Page, Username

from .base import Service


class FeedService(Service):
    """Builds article queries from listing filters and runs them.

    Every listing is sorted newest first and returns the total number of
    matches before pagination alongside the requested page.
    """

    def __init__(
        self,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize feed service.

        Args:
            article_repository: Article repository
            user_repository: User repository (to resolve usernames)
        """
        self.article_repository = article_repository
        self.user_repository = user_repository

    async def build_query(
        self,
        tag: Optional[str] = None,
        author: Optional[str] = None,
        favorited: Optional[str] = None,
    ) -> ArticleQuery:
        """Turn listing filters into an article query.

        A username filter that does not resolve becomes an empty id set,
        so the query matches nothing instead of ignoring the filter. An
        empty username counts as no filter at all.

        Args:
            tag: Tag the article must carry
            author: Username of the author
            favorited: Username whose favorites the article must be in

        Returns:
            The composed query
        """
        author_ids = None
        if author:
            author_user = await self._resolve(author)
            author_ids = frozenset({author_user.id}) if author_user else frozenset()

        article_ids = None
        if favorited:
            fan = await self._resolve(favorited)
            article_ids = fan.favorites if fan else frozenset()

        return ArticleQuery(tag=tag, author_ids=author_ids, article_ids=article_ids)

    async def list_articles(
        self,
        tag: Optional[str] = None,
        author: Optional[str] = None,
        favorited: Optional[str] = None,
        page: Page = Page(),
    ) -> tuple[list[Article], int]:
        """List articles matching the filters.

        Args:
            tag: Tag filter
            author: Author username filter
            favorited: Favorited-by username filter
            page: Pagination window (default 20 from offset 0)

        Returns:
            The requested page and the total match count
        """
        with logfire.span(
            "feed_service.list_articles",
            tag=tag,
            author=author,
            favorited=favorited,
            limit=page.limit,
            offset=page.offset,
        ):
            query = await self.build_query(tag=tag, author=author, favorited=favorited)
            return await self._run(query, page)

    async def feed(self, viewer: User, page: Page = Page()) -> tuple[list[Article], int]:
        """List articles written by the users the viewer follows.

        Args:
            viewer: The authenticated viewer
            page: Pagination window

        Returns:
            The requested page and the total match count
        """
        with logfire.span(
            "feed_service.feed",
            viewer_id=str(viewer.id),
            following=len(viewer.following),
            limit=page.limit,
            offset=page.offset,
        ):
            return await self._run(ArticleQuery(author_ids=viewer.following), page)

    async def _run(self, query: ArticleQuery, page: Page) -> tuple[list[Article], int]:
        if query.matches_nothing:
            logfire.info("Listing short-circuited, filter matches nothing")
            return [], 0
        articles = await self.article_repository.find_all(query, page)
        total = await self.article_repository.count(query)
        logfire.info("Articles listed", returned=len(articles), total=total)
        return articles, total

    async def _resolve(self, username: str) -> User | None:
        try:
            parsed = Username(username)
        except ValidationError:
            return None
        return await self.user_repository.find_by_username(parsed)
