"""Tests for AuthService."""

import pytest

from conduit.domain.error import NotAuthenticatedError, ValidationFailedError
from conduit.domain.service import AuthService, JWTService


class TestAuthenticate:
    """Tests for email/password login."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, auth_service: AuthService, register):
        # Arrange
        alice = await register("alice", password="secret")

        # Act
        user = await auth_service.authenticate("ALICE@example.com", "secret")

        # Assert
        assert user.id == alice.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service: AuthService, register):
        await register("alice", password="secret")

        with pytest.raises(ValidationFailedError) as exc_info:
            await auth_service.authenticate("alice@example.com", "wrong")

        assert exc_info.value.errors == {"email or password": "is invalid"}

    @pytest.mark.asyncio
    async def test_unknown_email_looks_like_wrong_password(
        self, auth_service: AuthService
    ):
        with pytest.raises(ValidationFailedError) as exc_info:
            await auth_service.authenticate("nobody@example.com", "secret")

        assert exc_info.value.errors == {"email or password": "is invalid"}

    @pytest.mark.asyncio
    async def test_blank_fields(self, auth_service: AuthService):
        with pytest.raises(ValidationFailedError) as exc_info:
            await auth_service.authenticate("", "")

        assert exc_info.value.errors == {
            "email": "can't be blank",
            "password": "can't be blank",
        }


class TestResolveUser:
    """Tests for turning tokens into users."""

    @pytest.mark.asyncio
    async def test_issued_token_resolves(self, auth_service: AuthService, register):
        alice = await register("alice")
        token = auth_service.issue_token(alice)

        user = await auth_service.resolve_user(token)

        assert user.id == alice.id

    @pytest.mark.asyncio
    async def test_missing_token(self, auth_service: AuthService):
        with pytest.raises(NotAuthenticatedError):
            await auth_service.resolve_user(None)

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth_service: AuthService):
        with pytest.raises(NotAuthenticatedError):
            await auth_service.resolve_user("garbage")

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(
        self, auth_service: AuthService, jwt_service: JWTService
    ):
        token = jwt_service.create_token(
            "00000000-0000-0000-0000-000000000000", "ghost"
        )

        with pytest.raises(NotAuthenticatedError):
            await auth_service.resolve_user(token)

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_id(
        self, auth_service: AuthService, jwt_service: JWTService
    ):
        token = jwt_service.create_token("not-a-uuid", "alice")

        with pytest.raises(NotAuthenticatedError):
            await auth_service.resolve_user(token)


class TestResolveViewer:
    """Tests for optional authentication."""

    @pytest.mark.asyncio
    async def test_no_token_is_anonymous(self, auth_service: AuthService):
        assert await auth_service.resolve_viewer(None) is None

    @pytest.mark.asyncio
    async def test_bad_token_still_rejected(self, auth_service: AuthService):
        with pytest.raises(NotAuthenticatedError):
            await auth_service.resolve_viewer("garbage")
