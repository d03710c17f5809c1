"""Tests for row/model mappers."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from conduit.domain.repository import ArticleQuery
from conduit.persistence.mappers import (
    article_to_dict,
    row_to_article,
    row_to_user,
    user_to_dict,
)
from conduit.persistence.repository.article import PostgresArticleRepository
from conduit.persistence.tables import articles_table


class TestUserMapping:
    """Tests for the users table mapping."""

    def test_relations_come_from_join_tables(self):
        # Arrange
        user_id, article_id, followee_id = uuid4(), uuid4(), uuid4()
        now = datetime.now()
        row = {
            "id": str(user_id),
            "username": "alice",
            "email": "alice@example.com",
            "bio": None,
            "image": None,
            "password_salt": "salt",
            "password_digest": "digest",
            "created_at": now,
            "updated_at": now,
        }

        # Act
        user = row_to_user(row, favorites=[article_id], following=[followee_id])

        # Assert
        assert user.id == user_id
        assert user.favorites == frozenset({article_id})
        assert user.following == frozenset({followee_id})
        assert "favorites" not in user_to_dict(user)
        assert user_to_dict(user)["username"] == "alice"


class TestArticleMapping:
    """Tests for the articles table mapping."""

    def test_arrays_keep_order(self):
        now = datetime.now()
        comment_ids = [uuid4(), uuid4()]
        row = {
            "id": uuid4(),
            "slug": "dragons-000001",
            "title": "Dragons",
            "description": "d",
            "body": "b",
            "tag_list": ["training", "dragons", "training"],
            "author_id": uuid4(),
            "comment_ids": comment_ids,
            "favorites_count": 2,
            "created_at": now,
            "updated_at": now,
        }

        article = row_to_article(row)

        assert article.slug.root == "dragons-000001"
        assert article.tag_list == ["training", "dragons", "training"]
        assert article.comment_ids == comment_ids
        assert article_to_dict(article)["slug"] == "dragons-000001"


class TestArticleQuerySql:
    """Tests for the WHERE clauses built from an article query."""

    def _sql(self, query: ArticleQuery) -> str:
        stmt = PostgresArticleRepository._apply_query(select(articles_table), query)
        return str(stmt.compile(dialect=postgresql.dialect()))

    def test_no_filters(self):
        assert "WHERE" not in self._sql(ArticleQuery())

    def test_tag_uses_array_any(self):
        assert "ANY (articles.tag_list)" in self._sql(ArticleQuery(tag="dragons"))

    def test_id_filters(self):
        sql = self._sql(
            ArticleQuery(author_ids=frozenset({uuid4()}), article_ids=frozenset({uuid4()}))
        )

        assert "articles.author_id IN" in sql
        assert "articles.id IN" in sql
