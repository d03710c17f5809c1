"""Tests for viewer-relative projections."""

from uuid import uuid4

from conduit.application.view import (
    DEFAULT_IMAGE,
    project_article,
    project_profile,
)
from conduit.domain.model import Article, User
from conduit.domain.value import Email, Username


def _user(username: str, **overrides) -> User:
    return User(
        id=uuid4(),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_salt="salt",
        password_digest="digest",
        **overrides,
    )


class TestProjectProfile:
    def test_default_image_for_missing_image(self):
        profile = project_profile(_user("alice"))

        assert profile.image == DEFAULT_IMAGE
        assert profile.following is False

    def test_following_relative_to_viewer(self):
        alice = _user("alice")
        bob = _user("bob", following=frozenset({alice.id}))

        assert project_profile(alice, bob).following is True
        assert project_profile(alice, alice).following is False


class TestProjectArticle:
    def test_camel_case_on_the_wire(self):
        # Arrange
        alice = _user("alice")
        article = Article(
            id=uuid4(),
            title="Dragons",
            description="d",
            body="b",
            tag_list=["dragons"],
            author_id=alice.id,
            favorites_count=3,
        )
        fan = _user("bob", favorites=frozenset({article.id}))

        # Act
        view = project_article(article, alice, fan)
        data = view.model_dump(by_alias=True)

        # Assert
        assert data["favorited"] is True
        assert data["favoritesCount"] == 3
        assert data["tagList"] == ["dragons"]
        assert set(data) == {
            "slug",
            "title",
            "description",
            "body",
            "tagList",
            "createdAt",
            "updatedAt",
            "favorited",
            "favoritesCount",
            "author",
        }

    def test_anonymous_viewer_sees_no_flags(self):
        alice = _user("alice")
        article = Article(
            id=uuid4(), title="Dragons", description="d", body="b", author_id=alice.id
        )

        view = project_article(article, alice)

        assert view.favorited is False
        assert view.author.following is False
