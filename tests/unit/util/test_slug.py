"""Tests for slug generation."""

import re

import pytest

from conduit.util.slug import SUFFIX_LENGTH, slugify, to_base36, transliterate


class TestToBase36:
    """Tests for base-36 rendering."""

    def test_zero_is_padded(self):
        assert to_base36(0) == "000000"

    def test_largest_suffix(self):
        assert to_base36(36**SUFFIX_LENGTH - 1) == "zzzzzz"

    def test_small_number(self):
        assert to_base36(35) == "00000z"
        assert to_base36(36) == "000010"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            to_base36(-1)


class TestTransliterate:
    """Tests for turning titles into slug bases."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("A New Day!", "a-new-day"),
            ("Crème brûlée", "creme-brulee"),
            ("  How   to   train  ", "how-to-train"),
            ("C++ & Rust", "c-rust"),
            ("!!!", ""),
        ],
    )
    def test_titles(self, title, expected):
        assert transliterate(title) == expected


class TestSlugify:
    """Tests for full slug derivation."""

    def test_base_and_suffix(self):
        slug = slugify("How to train your dragon")

        assert re.fullmatch(r"how-to-train-your-dragon-[0-9a-z]{6}", slug)

    def test_same_title_gives_different_slugs(self):
        slugs = {slugify("Same title") for _ in range(20)}

        assert len(slugs) > 1

    def test_untransliterable_title_is_bare_suffix(self):
        slug = slugify("!!!")

        assert re.fullmatch(r"[0-9a-z]{6}", slug)

    def test_long_title_fits_slug_column(self):
        slug = slugify("word " * 100)

        assert len(slug) <= 255
        assert re.fullmatch(r"[0-9a-z]+(-[0-9a-z]+)*", slug)
        assert "--" not in slug
