"""Tests for the comment use cases."""

import pytest

from conduit.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleUseCase,
)
from conduit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from conduit.application.usecase.user import RegisterUserRequest, RegisterUserUseCase
from conduit.domain.error import NotAuthorizedError, NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _token(unit_env, username: str) -> str:
    use_case = await unit_env.get(RegisterUserUseCase)
    response = await use_case.execute(
        RegisterUserRequest(
            username=username, email=f"{username}@example.com", password="secret"
        )
    )
    return response.user.token


async def _slug(unit_env, token: str) -> str:
    use_case = await unit_env.get(CreateArticleUseCase)
    response = await use_case.execute(
        CreateArticleRequest(token=token, title="Dragons", description="d", body="b")
    )
    return response.article.slug


class TestAddCommentUseCase:
    """Tests for commenting."""

    @pytest.mark.asyncio
    async def test_comment_view(self, unit_env):
        # Arrange
        alice = await _token(unit_env, "alice")
        slug = await _slug(unit_env, alice)
        use_case = await unit_env.get(AddCommentUseCase)

        # Act
        response = await use_case.execute(
            AddCommentRequest(slug=slug, token=alice, body="First!")
        )

        # Assert
        assert response.comment.body == "First!"
        assert response.comment.author.username == "alice"
        assert response.comment.id

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env):
        alice = await _token(unit_env, "alice")
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(slug="missing-000000", token=alice, body="Hi")
            )


class TestListAndDeleteComments:
    """Tests for reading and deleting comments."""

    @pytest.mark.asyncio
    async def test_list_anonymously(self, unit_env):
        alice = await _token(unit_env, "alice")
        slug = await _slug(unit_env, alice)
        add = await unit_env.get(AddCommentUseCase)
        await add.execute(AddCommentRequest(slug=slug, token=alice, body="Hi"))
        use_case = await unit_env.get(ListCommentsUseCase)

        response = await use_case.execute(ListCommentsRequest(slug=slug))

        assert [c.body for c in response.comments] == ["Hi"]

    @pytest.mark.asyncio
    async def test_only_author_deletes(self, unit_env):
        # Arrange
        alice = await _token(unit_env, "alice")
        bob = await _token(unit_env, "bob")
        slug = await _slug(unit_env, alice)
        add = await unit_env.get(AddCommentUseCase)
        added = await add.execute(AddCommentRequest(slug=slug, token=bob, body="Hi"))
        delete = await unit_env.get(DeleteCommentUseCase)
        listing = await unit_env.get(ListCommentsUseCase)

        # Act / Assert
        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(
                    slug=slug, comment_id=added.comment.id, token=alice
                )
            )
        await delete.execute(
            DeleteCommentRequest(slug=slug, comment_id=added.comment.id, token=bob)
        )

        response = await listing.execute(ListCommentsRequest(slug=slug))
        assert response.comments == []
