"""Tests for the profile use cases."""

import pytest

from conduit.application.usecase.profile import (
    FollowUserRequest,
    FollowUserUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    UnfollowUserRequest,
    UnfollowUserUseCase,
)
from conduit.application.usecase.user import RegisterUserRequest, RegisterUserUseCase
from conduit.application.view import DEFAULT_IMAGE
from conduit.domain.error import NotAuthenticatedError, NotFoundError
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


class TestGetProfileUseCase:
    """Tests for reading profiles."""

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, unit_env):
        # Arrange
        await _token(unit_env, "alice")
        use_case = await unit_env.get(GetProfileUseCase)

        # Act
        response = await use_case.execute(GetProfileRequest(username="Alice"))

        # Assert
        assert response.profile.username == "alice"
        assert response.profile.image == DEFAULT_IMAGE
        assert response.profile.following is False

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(username="nobody"))


class TestFollowUseCases:
    """Tests for following and unfollowing."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        # Arrange
        alice = await _token(unit_env, "alice")
        await _token(unit_env, "bob")
        follow = await unit_env.get(FollowUserUseCase)
        unfollow = await unit_env.get(UnfollowUserUseCase)
        profile = await unit_env.get(GetProfileUseCase)

        # Act
        followed = await follow.execute(FollowUserRequest(username="bob", token=alice))
        seen = await profile.execute(GetProfileRequest(username="bob", token=alice))
        unfollowed = await unfollow.execute(
            UnfollowUserRequest(username="bob", token=alice)
        )

        # Assert
        assert followed.profile.following is True
        assert seen.profile.following is True
        assert unfollowed.profile.following is False

    @pytest.mark.asyncio
    async def test_follow_self(self, unit_env):
        alice = await _token(unit_env, "alice")
        follow = await unit_env.get(FollowUserUseCase)

        response = await follow.execute(
            FollowUserRequest(username="alice", token=alice)
        )

        assert response.profile.following is True

    @pytest.mark.asyncio
    async def test_follow_requires_token(self, unit_env):
        await _token(unit_env, "bob")
        follow = await unit_env.get(FollowUserUseCase)

        with pytest.raises(NotAuthenticatedError):
            await follow.execute(FollowUserRequest(username="bob"))
