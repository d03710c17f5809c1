"""Tests for domain value objects."""

import pytest
from pydantic import ValidationError

from conduit.domain.value import Email, Page, Slug, Username


class TestUsername:
    def test_lower_cased(self):
        assert Username("Alice42").root == "alice42"

    @pytest.mark.parametrize("value", ["", "with space", "dash-ed", "ünï"])
    def test_rejects_non_alphanumeric(self, value):
        with pytest.raises(ValidationError):
            Username(value)


class TestEmail:
    def test_lower_cased(self):
        assert Email("Alice@Example.COM").root == "alice@example.com"

    @pytest.mark.parametrize("value", ["", "alice", "alice@example", "@example.com"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError):
            Email(value)


class TestSlug:
    @pytest.mark.parametrize("value", ["-leading", "trailing-", "dou--ble", "Upper"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError):
            Slug(value)


class TestPage:
    """Tests for the pagination window."""

    def test_defaults(self):
        page = Page()

        assert (page.limit, page.offset) == (20, 0)

    def test_apply_window(self):
        assert Page(limit=2, offset=1).apply([1, 2, 3, 4]) == [2, 3]

    def test_apply_zero_limit_is_unbounded(self):
        assert Page(limit=0, offset=1).apply([1, 2, 3, 4]) == [2, 3, 4]

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Page(limit=-1)
