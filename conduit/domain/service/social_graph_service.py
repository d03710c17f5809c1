"""Social graph domain service.

Maintains the two user-owned relations, ``following`` (user to user) and
``favorites`` (user to article), and the ``favorites_count`` derived from
the latter.
"""

from datetime import datetime

import logfire

from conduit.domain.model import Article, User
from conduit.domain.repository import ArticleRepository, UserRepository
from conduit.domain.value import ArticleId, UserId

from .base import Service


class SocialGraphService(Service):
    """Domain service for follow and favorite relations.

    Every mutation is idempotent: adding a member that is already present
    or removing one that is absent still succeeds and still persists.

    ``favorites_count`` is never incremented. After each favorite change
    it is re-derived from the users' favorites, which also repairs any
    earlier drift. The read of the count and the write onto the article
    are two separate store calls, so two concurrent changes on the same
    article can leave a stale count until the next recompute.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize social graph service.

        Args:
            user_repository: User repository (owns the relations)
            article_repository: Article repository (owns the counter)
        """
        self.user_repository = user_repository
        self.article_repository = article_repository

    async def favorite(self, user: User, article: Article) -> tuple[User, Article]:
        """Add an article to a user's favorites.

        Args:
            user: The favoriting user
            article: A resolved article

        Returns:
            The saved user and the article with its recomputed count
        """
        with logfire.span(
            "social_graph_service.favorite",
            user_id=str(user.id),
            article_id=str(article.id),
        ):
            saved_user = await self._save_user(
                user, favorites=user.favorites | {article.id}
            )
            updated = await self.recompute_favorites_count(article)
            logfire.info(
                "Article favorited",
                user_id=str(user.id),
                article_id=str(article.id),
                favorites_count=updated.favorites_count,
            )
            return saved_user, updated

    async def unfavorite(self, user: User, article: Article) -> tuple[User, Article]:
        """Remove an article from a user's favorites.

        Args:
            user: The user
            article: A resolved article

        Returns:
            The saved user and the article with its recomputed count
        """
        with logfire.span(
            "social_graph_service.unfavorite",
            user_id=str(user.id),
            article_id=str(article.id),
        ):
            saved_user = await self._save_user(
                user, favorites=user.favorites - {article.id}
            )
            updated = await self.recompute_favorites_count(article)
            logfire.info(
                "Article unfavorited",
                user_id=str(user.id),
                article_id=str(article.id),
                favorites_count=updated.favorites_count,
            )
            return saved_user, updated

    async def follow(self, user: User, target: User) -> User:
        """Add a user to another user's following set.

        Following oneself is not rejected.

        Args:
            user: The follower
            target: A resolved user to follow

        Returns:
            The saved follower
        """
        with logfire.span(
            "social_graph_service.follow",
            user_id=str(user.id),
            target_id=str(target.id),
        ):
            saved = await self._save_user(user, following=user.following | {target.id})
            logfire.info("User followed", user_id=str(user.id), target_id=str(target.id))
            return saved

    async def unfollow(self, user: User, target: User) -> User:
        """Remove a user from another user's following set.

        Args:
            user: The follower
            target: A resolved user to stop following

        Returns:
            The saved follower
        """
        with logfire.span(
            "social_graph_service.unfollow",
            user_id=str(user.id),
            target_id=str(target.id),
        ):
            saved = await self._save_user(user, following=user.following - {target.id})
            logfire.info(
                "User unfollowed", user_id=str(user.id), target_id=str(target.id)
            )
            return saved

    @staticmethod
    def is_favorite(user: User | None, article_id: ArticleId) -> bool:
        """Whether the article is in the user's favorites (False if anonymous)."""
        return user is not None and article_id in user.favorites

    @staticmethod
    def is_following(user: User | None, target_id: UserId) -> bool:
        """Whether the user follows the target (False if anonymous)."""
        return user is not None and target_id in user.following

    async def recompute_favorites_count(self, article: Article) -> Article:
        """Re-derive an article's favorites count from the users' favorites.

        The stored value is ignored; the result is always the number of
        users whose favorites contain the article.

        Args:
            article: The article to update

        Returns:
            The saved article
        """
        with logfire.span(
            "social_graph_service.recompute_favorites_count",
            article_id=str(article.id),
        ):
            count = await self.user_repository.count_favoriting(article.id)
            if count != article.favorites_count:
                logfire.info(
                    "Favorites count changed",
                    article_id=str(article.id),
                    previous=article.favorites_count,
                    current=count,
                )
            return await self.article_repository.save(
                article.model_copy(update={"favorites_count": count})
            )

    async def _save_user(self, user: User, **relations: frozenset) -> User:
        relations_update = {**relations, "updated_at": datetime.now()}
        return await self.user_repository.save(user.model_copy(update=relations_update))
