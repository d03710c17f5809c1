"""List articles use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from conduit.application.view import ArticleView, View, load_authors, project_article
from conduit.domain.model import Article, User
from conduit.domain.repository import UserRepository
from conduit.domain.service import AuthService, FeedService
from conduit.domain.value import DEFAULT_PAGE_LIMIT, Page


class ListArticlesRequest(BaseModel):
    """List articles request."""

    token: str | None = None  # Optional viewer
    tag: Optional[str] = None
    author: Optional[str] = None  # Username
    favorited: Optional[str] = None  # Username
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)


class MultipleArticlesResponse(View):
    """A page of articles and the total number of matches."""

    articles: list[ArticleView]
    articles_count: int


async def project_articles(
    user_repository: UserRepository,
    articles: list[Article],
    total: int,
    viewer: User | None,
) -> MultipleArticlesResponse:
    """Project a page of articles, loading their authors in one query."""
    authors = await load_authors(user_repository, (a.author_id for a in articles))
    return MultipleArticlesResponse(
        articles=[
            project_article(article, authors[article.author_id], viewer)
            for article in articles
            if article.author_id in authors
        ],
        articles_count=total,
    )


class ListArticlesUseCase:
    """Use case for the public, filterable article listing."""

    def __init__(
        self,
        auth_service: AuthService,
        feed_service: FeedService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize list articles use case.

        Args:
            auth_service: Authentication domain service
            feed_service: Feed composition domain service
            user_repository: User repository (batch author lookup)
        """
        self.auth_service = auth_service
        self.feed_service = feed_service
        self.user_repository = user_repository

    async def execute(self, request: ListArticlesRequest) -> MultipleArticlesResponse:
        """Execute list articles flow.

        Steps:
        1. Resolve the optional viewer
        2. Compose and run the filtered query (via FeedService)
        3. Load authors and project each article for the viewer

        Returns:
            Articles newest first, with the unpaginated match count
        """
        viewer = await self.auth_service.resolve_viewer(request.token)

        with logfire.span(
            "list_articles.execute",
            tag=request.tag,
            author=request.author,
            favorited=request.favorited,
        ):
            articles, total = await self.feed_service.list_articles(
                tag=request.tag,
                author=request.author,
                favorited=request.favorited,
                page=Page(limit=request.limit, offset=request.offset),
            )
            return await project_articles(
                self.user_repository, articles, total, viewer
            )
