"""Article domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError

from conduit.domain.error import NotFoundError, ValidationFailedError
from conduit.domain.model import Article, User
from conduit.domain.repository import ArticleRepository, CommentRepository
from conduit.domain.value import ArticleId, Slug

from .authorization_service import AuthorizationService
from .base import Service
from .user_service import BLANK, TAKEN

UPDATABLE_FIELDS = ("title", "description", "body", "tag_list")


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            comment_repository: Comment repository (for cascading deletes)
            authorization_service: Ownership guard
        """
        self.article_repository = article_repository
        self.comment_repository = comment_repository
        self.authorization_service = authorization_service

    async def create_article(
        self,
        author: User,
        title: str,
        description: str,
        body: str,
        tag_list: list[str] | None = None,
    ) -> Article:
        """Create an article.

        The slug is derived from the title here, once. A collision with an
        existing slug is reported rather than retried.

        Args:
            author: Authoring user
            title: Title
            description: Short description
            body: Body text
            tag_list: Tags in the order entered

        Returns:
            Created article

        Raises:
            ValidationFailedError: If a field is blank or the slug is taken
        """
        with logfire.span(
            "article_service.create_article", author_id=str(author.id), title=title
        ):
            _check_not_blank(
                {"title": title, "description": description, "body": body}
            )

            now = datetime.now()
            article = Article(
                id=ArticleId(uuid4()),
                title=title,
                description=description,
                body=body,
                tag_list=list(tag_list or []),
                author_id=author.id,
                created_at=now,
                updated_at=now,
            )
            if await self.article_repository.slug_exists(article.slug):
                logfire.warn("Slug collision", slug=article.slug.root)
                raise ValidationFailedError({"slug": TAKEN})

            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created",
                article_id=str(saved.id),
                slug=saved.slug.root,
                author_id=str(author.id),
            )
            return saved

    async def get_by_slug(self, slug: str) -> Article:
        """Get an article by slug.

        Args:
            slug: Slug as it appears in the URL

        Returns:
            The article

        Raises:
            NotFoundError: If no article has this slug
        """
        with logfire.span("article_service.get_by_slug", slug=slug):
            article = None
            try:
                article = await self.article_repository.find_by_slug(Slug(slug))
            except ValidationError:
                pass
            if article is None:
                logfire.warn("Article not found", slug=slug)
                raise NotFoundError("Article", slug)
            return article

    async def update_article(
        self, actor: User, article: Article, changes: dict[str, Any]
    ) -> Article:
        """Apply a partial update to an article.

        Only the keys in ``changes`` that name an updatable field are
        applied. The slug is never regenerated.

        Args:
            actor: Acting user
            article: The article to update
            changes: Subset of title, description, body, tag_list

        Returns:
            The saved article

        Raises:
            NotAuthorizedError: If the actor is not the author
            ValidationFailedError: If a text field is set to blank
        """
        with logfire.span(
            "article_service.update_article",
            article_id=str(article.id),
            actor_id=str(actor.id),
            fields=sorted(changes),
        ):
            self.authorization_service.ensure_can_modify(
                actor.id, article.author_id, "article", article.slug.root
            )

            update = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
            _check_not_blank({k: v for k, v in update.items() if k != "tag_list"})
            if "tag_list" in update:
                update["tag_list"] = list(update["tag_list"] or [])
            update["updated_at"] = datetime.now()

            saved = await self.article_repository.save(
                article.model_copy(update=update)
            )
            logfire.info("Article updated", article_id=str(saved.id))
            return saved

    async def delete_article(self, actor: User, article: Article) -> None:
        """Delete an article together with its comments.

        Args:
            actor: Acting user
            article: The article to delete

        Raises:
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "article_service.delete_article",
            article_id=str(article.id),
            actor_id=str(actor.id),
        ):
            self.authorization_service.ensure_can_modify(
                actor.id, article.author_id, "article", article.slug.root
            )
            removed = await self.comment_repository.delete_by_article(article.id)
            await self.article_repository.delete(article.id)
            logfire.info(
                "Article deleted",
                article_id=str(article.id),
                comments_deleted=removed,
            )

    async def list_tags(self) -> list[str]:
        """List every distinct tag in use, sorted."""
        with logfire.span("article_service.list_tags"):
            tags = await self.article_repository.find_distinct_tags()
            logfire.info("Tags listed", count=len(tags))
            return tags


def _check_not_blank(fields: dict[str, str | None]) -> None:
    errors = {name: BLANK for name, value in fields.items() if not value}
    if errors:
        raise ValidationFailedError(errors)
