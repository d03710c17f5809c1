"""Tests for CommentService."""

from uuid import uuid4

import pytest

from conduit.domain.error import NotAuthorizedError, NotFoundError, ValidationFailedError
from conduit.domain.service import CommentService


class TestAddComment:
    """Tests for commenting on articles."""

    @pytest.mark.asyncio
    async def test_comment_is_referenced_by_article(
        self, comment_service: CommentService, article_repository, register, publish
    ):
        # Arrange
        alice = await register("alice")
        bob = await register("bob")
        article = await publish(alice, "Dragons")

        # Act
        comment = await comment_service.add_comment(bob, article, "Nice one")

        # Assert
        assert comment.author_id == bob.id
        assert comment.article_id == article.id
        stored = await article_repository.find_by_id(article.id)
        assert stored.comment_ids == [comment.id]

    @pytest.mark.asyncio
    async def test_blank_body(
        self, comment_service: CommentService, register, publish
    ):
        alice = await register("alice")
        article = await publish(alice, "Dragons")

        with pytest.raises(ValidationFailedError) as exc_info:
            await comment_service.add_comment(alice, article, "")

        assert exc_info.value.errors == {"body": "can't be blank"}

    @pytest.mark.asyncio
    async def test_list_is_newest_first(
        self, comment_service: CommentService, article_repository, register, publish
    ):
        alice = await register("alice")
        article = await publish(alice, "Dragons")
        first = await comment_service.add_comment(alice, article, "first")
        article = await article_repository.find_by_id(article.id)
        second = await comment_service.add_comment(alice, article, "second")

        comments = await comment_service.list_for_article(article)

        assert [c.id for c in comments] == [second.id, first.id]


class TestDeleteComment:
    """Tests for deleting comments."""

    @pytest.mark.asyncio
    async def test_author_deletes(
        self,
        comment_service: CommentService,
        article_repository,
        comment_repository,
        register,
        publish,
    ):
        # Arrange
        alice = await register("alice")
        article = await publish(alice, "Dragons")
        comment = await comment_service.add_comment(alice, article, "Oops")
        article = await article_repository.find_by_id(article.id)

        # Act
        await comment_service.delete_comment(alice, article, str(comment.id))

        # Assert
        assert await comment_repository.find_by_id(comment.id) is None
        stored = await article_repository.find_by_id(article.id)
        assert stored.comment_ids == []

    @pytest.mark.asyncio
    async def test_non_author_rejected(
        self,
        comment_service: CommentService,
        article_repository,
        comment_repository,
        register,
        publish,
    ):
        alice = await register("alice")
        bob = await register("bob")
        article = await publish(alice, "Dragons")
        comment = await comment_service.add_comment(alice, article, "Mine")
        article = await article_repository.find_by_id(article.id)

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(bob, article, str(comment.id))

        assert await comment_repository.find_by_id(comment.id) is not None
        stored = await article_repository.find_by_id(article.id)
        assert stored.comment_ids == [comment.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", ["not-a-uuid", str(uuid4())])
    async def test_unknown_comment(
        self, comment_service: CommentService, register, publish, comment_id
    ):
        alice = await register("alice")
        article = await publish(alice, "Dragons")

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.delete_comment(alice, article, comment_id)

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_comment_on_other_article_not_found(
        self, comment_service: CommentService, register, publish
    ):
        alice = await register("alice")
        first = await publish(alice, "First")
        second = await publish(alice, "Second")
        comment = await comment_service.add_comment(alice, first, "On first")

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(alice, second, str(comment.id))
