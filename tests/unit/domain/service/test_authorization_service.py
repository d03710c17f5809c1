"""Tests for AuthorizationService."""

from uuid import uuid4

import pytest

from conduit.domain.error import NotAuthorizedError
from conduit.domain.service import AuthorizationService


class TestAuthorizationService:
    """Tests for the ownership guard."""

    def test_author_may_modify(self):
        user_id = uuid4()

        assert AuthorizationService.can_modify(user_id, user_id)

    def test_uuid_and_text_forms_are_the_same_identity(self):
        user_id = uuid4()

        assert AuthorizationService.can_modify(user_id, str(user_id))

    def test_other_user_may_not_modify(self):
        assert not AuthorizationService.can_modify(uuid4(), uuid4())

    def test_ensure_raises_for_non_author(self):
        service = AuthorizationService()
        acting = uuid4()

        with pytest.raises(NotAuthorizedError) as exc_info:
            service.ensure_can_modify(acting, uuid4(), "article", "some-slug")

        assert exc_info.value.resource == "article"
        assert exc_info.value.resource_id == "some-slug"
        assert exc_info.value.user_id == str(acting)

    def test_ensure_passes_for_author(self):
        service = AuthorizationService()
        user_id = uuid4()

        service.ensure_can_modify(user_id, user_id, "comment", "c1")
