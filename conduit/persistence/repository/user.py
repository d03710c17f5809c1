"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Iterable, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import ArticleId, Email, UserId, Username
from conduit.persistence.mappers import row_to_user, user_to_dict
from conduit.persistence.tables import (
    user_favorites_table,
    user_follows_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    ``favorites`` and ``following`` are stored as rows in join tables and
    rewritten in full on save.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_relations(
        self, user_ids: list[UUID]
    ) -> tuple[dict[UUID, list[UUID]], dict[UUID, list[UUID]]]:
        """Fetch favorites and following for several users at once.

        Args:
            user_ids: List of user IDs

        Returns:
            Two dicts mapping user_id -> article IDs and user_id -> followee IDs
        """
        favorites: dict[UUID, list[UUID]] = defaultdict(list)
        following: dict[UUID, list[UUID]] = defaultdict(list)
        if not user_ids:
            return favorites, following

        result = await self.session.execute(
            select(user_favorites_table).where(
                user_favorites_table.c.user_id.in_(user_ids)
            )
        )
        for row in result.fetchall():
            favorites[row.user_id].append(row.article_id)

        result = await self.session.execute(
            select(user_follows_table).where(
                user_follows_table.c.follower_id.in_(user_ids)
            )
        )
        for row in result.fetchall():
            following[row.follower_id].append(row.followee_id)

        return favorites, following

    async def _load(self, stmt) -> List[User]:
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        favorites, following = await self._fetch_relations([r["id"] for r in rows])
        return [
            row_to_user(row, favorites[row["id"]], following[row["id"]])
            for row in rows
        ]

    async def _load_one(self, stmt) -> Optional[User]:
        users = await self._load(stmt)
        return users[0] if users else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._load_one(
            select(users_table).where(users_table.c.id == user_id)
        )

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users in one query."""
        ids = list(user_ids)
        if not ids:
            return []
        return await self._load(select(users_table).where(users_table.c.id.in_(ids)))

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        return await self._load_one(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        return await self._load_one(
            select(users_table).where(users_table.c.email == email.root)
        )

    async def save(self, user: User) -> User:
        """Save a user (create or update) with its relation rows.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            exists = await self.session.scalar(
                select(func.count())
                .select_from(users_table)
                .where(users_table.c.id == user.id)
            )
            user_dict = user_to_dict(user)

            if exists:
                await self.session.execute(
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                await self.session.execute(users_table.insert().values(**user_dict))

            await self.session.execute(
                delete(user_favorites_table).where(
                    user_favorites_table.c.user_id == user.id
                )
            )
            if user.favorites:
                await self.session.execute(
                    insert(user_favorites_table),
                    [
                        {"user_id": user.id, "article_id": article_id}
                        for article_id in user.favorites
                    ],
                )

            await self.session.execute(
                delete(user_follows_table).where(
                    user_follows_table.c.follower_id == user.id
                )
            )
            if user.following:
                await self.session.execute(
                    insert(user_follows_table),
                    [
                        {"follower_id": user.id, "followee_id": followee_id}
                        for followee_id in user.following
                    ],
                )

            await self.session.flush()
            return user

    async def count_favoriting(self, article_id: ArticleId) -> int:
        """Count users whose favorites contain the article."""
        stmt = (
            select(func.count())
            .select_from(user_favorites_table)
            .where(user_favorites_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
