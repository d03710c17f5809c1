"""Tests for Authorization header parsing."""

import pytest

from conduit.interface.api.auth import parse_authorization


class TestParseAuthorization:
    """Tests for extracting the token from the header."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Token abc.def.ghi", "abc.def.ghi"),
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("token abc", "abc"),
            (None, None),
            ("", None),
            ("Basic dXNlcjpwYXNz", None),
            ("Token", None),
            ("Token   ", None),
        ],
    )
    def test_headers(self, header, expected):
        assert parse_authorization(header) == expected
