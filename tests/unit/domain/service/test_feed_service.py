"""Tests for FeedService."""

from datetime import datetime, timedelta

import pytest

from conduit.domain.service import FeedService
from conduit.domain.value import Page


@pytest.fixture
def publish_at(publish, article_repository):
    """Publish an article with a fixed creation time, hours after a base."""
    base = datetime(2024, 1, 1, 12, 0, 0)

    async def _publish_at(author, title, hours, tag_list=None):
        article = await publish(author, title, tag_list)
        return await article_repository.save(
            article.model_copy(update={"created_at": base + timedelta(hours=hours)})
        )

    return _publish_at


class TestListArticles:
    """Tests for the filterable listing."""

    @pytest.mark.asyncio
    async def test_default_page_is_twenty_newest_first(
        self, feed_service: FeedService, register, publish_at
    ):
        # Arrange
        alice = await register("alice")
        for hour in range(25):
            await publish_at(alice, f"Article {hour}", hour)

        # Act
        articles, total = await feed_service.list_articles()

        # Assert
        assert total == 25
        assert len(articles) == 20
        assert articles[0].title == "Article 24"
        assert articles[-1].title == "Article 5"

    @pytest.mark.asyncio
    async def test_limit_and_offset(
        self, feed_service: FeedService, register, publish_at
    ):
        alice = await register("alice")
        for hour in range(5):
            await publish_at(alice, f"Article {hour}", hour)

        articles, total = await feed_service.list_articles(
            page=Page(limit=2, offset=1)
        )

        assert total == 5
        assert [a.title for a in articles] == ["Article 3", "Article 2"]

    @pytest.mark.asyncio
    async def test_limit_zero_means_no_limit(
        self, feed_service: FeedService, register, publish_at
    ):
        alice = await register("alice")
        for hour in range(25):
            await publish_at(alice, f"Article {hour}", hour)

        articles, total = await feed_service.list_articles(page=Page(limit=0))

        assert len(articles) == total == 25

    @pytest.mark.asyncio
    async def test_tag_filter(self, feed_service: FeedService, register, publish_at):
        alice = await register("alice")
        await publish_at(alice, "Dragons", 1, ["dragons"])
        await publish_at(alice, "Angular", 2, ["angular"])

        articles, total = await feed_service.list_articles(tag="dragons")

        assert total == 1
        assert [a.title for a in articles] == ["Dragons"]

    @pytest.mark.asyncio
    async def test_author_filter_any_case(
        self, feed_service: FeedService, register, publish_at
    ):
        alice = await register("alice")
        bob = await register("bob")
        await publish_at(alice, "By Alice", 1)
        await publish_at(bob, "By Bob", 2)

        articles, total = await feed_service.list_articles(author="BOB")

        assert total == 1
        assert articles[0].author_id == bob.id

    @pytest.mark.asyncio
    async def test_favorited_filter(
        self, feed_service: FeedService, social_graph_service, register, publish_at
    ):
        alice = await register("alice")
        bob = await register("bob")
        liked = await publish_at(alice, "Liked", 1)
        await publish_at(alice, "Ignored", 2)
        await social_graph_service.favorite(bob, liked)

        articles, total = await feed_service.list_articles(favorited="bob")

        assert total == 1
        assert articles[0].id == liked.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "filters", [{"author": "nobody"}, {"favorited": "nobody"}]
    )
    async def test_unknown_user_filter_matches_nothing(
        self, feed_service: FeedService, register, publish_at, filters
    ):
        alice = await register("alice")
        await publish_at(alice, "Dragons", 1)

        articles, total = await feed_service.list_articles(**filters)

        assert articles == []
        assert total == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filters", [{"author": ""}, {"favorited": ""}])
    async def test_empty_user_filter_is_ignored(
        self, feed_service: FeedService, register, publish_at, filters
    ):
        alice = await register("alice")
        await publish_at(alice, "Dragons", 1)

        articles, total = await feed_service.list_articles(**filters)

        assert total == 1
        assert articles[0].author_id == alice.id

    @pytest.mark.asyncio
    async def test_filters_combine(
        self, feed_service: FeedService, register, publish_at
    ):
        alice = await register("alice")
        bob = await register("bob")
        await publish_at(alice, "Alice dragons", 1, ["dragons"])
        await publish_at(alice, "Alice angular", 2, ["angular"])
        await publish_at(bob, "Bob dragons", 3, ["dragons"])

        articles, total = await feed_service.list_articles(
            tag="dragons", author="alice"
        )

        assert total == 1
        assert articles[0].title == "Alice dragons"


class TestFeed:
    """Tests for the personal feed."""

    @pytest.mark.asyncio
    async def test_only_followed_authors(
        self, feed_service: FeedService, social_graph_service, register, publish_at
    ):
        # Arrange
        alice = await register("alice")
        bob = await register("bob")
        carol = await register("carol")
        await publish_at(bob, "Bob 1", 1)
        await publish_at(carol, "Carol 1", 2)
        await publish_at(bob, "Bob 2", 3)
        alice = await social_graph_service.follow(alice, bob)

        # Act
        articles, total = await feed_service.feed(alice)

        # Assert
        assert total == 2
        assert [a.title for a in articles] == ["Bob 2", "Bob 1"]

    @pytest.mark.asyncio
    async def test_following_nobody_is_empty(
        self, feed_service: FeedService, register, publish_at
    ):
        alice = await register("alice")
        await publish_at(alice, "Own article", 1)

        articles, total = await feed_service.feed(alice)

        assert (articles, total) == ([], 0)
