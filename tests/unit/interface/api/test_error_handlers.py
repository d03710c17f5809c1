"""Tests for mapping database errors onto HTTP responses."""

import json

import pytest
from sqlalchemy.exc import IntegrityError

from conduit.interface.api.error_handlers import handle_integrity_error


def _unique_violation(constraint: str) -> IntegrityError:
    return IntegrityError(
        "INSERT INTO ...",
        {},
        Exception(f'duplicate key value violates unique constraint "{constraint}"'),
    )


class TestHandleIntegrityError:
    """Tests for unique-constraint races surfacing as field errors."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "constraint,field",
        [
            ("uq_users_username", "username"),
            ("uq_users_email", "email"),
            ("uq_articles_slug", "slug"),
        ],
    )
    async def test_known_constraint_names_the_field(self, constraint, field):
        # Arrange
        exc = _unique_violation(constraint)

        # Act
        response = await handle_integrity_error(None, exc)

        # Assert
        assert response.status_code == 422
        assert json.loads(response.body) == {"errors": {field: "is already taken"}}

    @pytest.mark.asyncio
    async def test_unknown_constraint_is_generic(self):
        exc = IntegrityError("INSERT INTO ...", {}, Exception("check violated"))

        response = await handle_integrity_error(None, exc)

        assert response.status_code == 422
        assert json.loads(response.body) == {"errors": {"record": "is invalid"}}
