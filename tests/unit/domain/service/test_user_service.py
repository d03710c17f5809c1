"""Tests for UserService."""

import pytest

from conduit.domain.error import NotFoundError, ValidationFailedError
from conduit.domain.service import UserService


class TestRegister:
    """Tests for account registration."""

    @pytest.mark.asyncio
    async def test_register_normalizes_case(self, user_service: UserService):
        # Act
        user = await user_service.register("Alice", "Alice@Example.COM", "secret")

        # Assert
        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.password_digest != "secret"
        assert len(user.password_salt) == 32

    @pytest.mark.asyncio
    async def test_blank_fields_reported_together(self, user_service: UserService):
        with pytest.raises(ValidationFailedError) as exc_info:
            await user_service.register("", "", "")

        assert exc_info.value.errors == {
            "username": "can't be blank",
            "email": "can't be blank",
            "password": "can't be blank",
        }

    @pytest.mark.asyncio
    async def test_malformed_fields(self, user_service: UserService):
        with pytest.raises(ValidationFailedError) as exc_info:
            await user_service.register("not valid!", "nope", "secret")

        assert exc_info.value.errors == {
            "username": "is invalid",
            "email": "is invalid",
        }

    @pytest.mark.asyncio
    async def test_taken_is_case_insensitive(self, user_service: UserService):
        # Arrange
        await user_service.register("alice", "alice@example.com", "secret")

        # Act / Assert
        with pytest.raises(ValidationFailedError) as exc_info:
            await user_service.register("ALICE", "ALICE@example.com", "secret")

        assert exc_info.value.errors == {
            "username": "is already taken",
            "email": "is already taken",
        }


class TestUpdateUser:
    """Tests for partial account updates."""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, user_service: UserService, register):
        # Arrange
        user = await register("alice")

        # Act
        updated = await user_service.update_user(user, {"bio": "I like dragons"})

        # Assert
        assert updated.bio == "I like dragons"
        assert updated.username == user.username
        assert updated.email == user.email
        assert updated.password_digest == user.password_digest

    @pytest.mark.asyncio
    async def test_keeping_own_username_is_not_taken(
        self, user_service: UserService, register
    ):
        user = await register("alice")

        updated = await user_service.update_user(
            user, {"username": "alice", "email": "alice@example.com"}
        )

        assert updated.username.root == "alice"

    @pytest.mark.asyncio
    async def test_new_password_rederives_salt_and_digest(
        self, user_service: UserService, password_service, register
    ):
        user = await register("alice")

        updated = await user_service.update_user(user, {"password": "hunter2"})

        assert updated.password_salt != user.password_salt
        assert password_service.verify(
            "hunter2", updated.password_salt, updated.password_digest
        )

    @pytest.mark.asyncio
    async def test_taking_another_users_name_rejected(
        self, user_service: UserService, register
    ):
        await register("alice")
        bob = await register("bob")

        with pytest.raises(ValidationFailedError) as exc_info:
            await user_service.update_user(bob, {"username": "alice"})

        assert exc_info.value.errors == {"username": "is already taken"}

    @pytest.mark.asyncio
    async def test_blank_password_rejected(self, user_service: UserService, register):
        user = await register("alice")

        with pytest.raises(ValidationFailedError) as exc_info:
            await user_service.update_user(user, {"password": ""})

        assert exc_info.value.errors == {"password": "can't be blank"}


class TestLookup:
    """Tests for finding users."""

    @pytest.mark.asyncio
    async def test_get_by_username_any_case(self, user_service: UserService, register):
        alice = await register("alice")

        found = await user_service.get_by_username("ALICE")

        assert found.id == alice.id

    @pytest.mark.asyncio
    async def test_unknown_username(self, user_service: UserService):
        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_by_username("nobody")

        assert exc_info.value.resource == "Profile"

    @pytest.mark.asyncio
    async def test_malformed_username_is_none(self, user_service: UserService):
        assert await user_service.find_by_username("not valid!") is None
