"""Tests for the Article model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from conduit.domain.model import Article
from conduit.domain.value import Slug


def _article(**overrides):
    fields = {
        "id": uuid4(),
        "title": "A New Day",
        "description": "d",
        "body": "b",
        "author_id": uuid4(),
    }
    fields.update(overrides)
    return Article(**fields)


class TestArticle:
    """Tests for slug assignment and field rules."""

    def test_slug_assigned_when_missing(self):
        article = _article()

        assert article.slug.root.startswith("a-new-day-")

    def test_existing_slug_kept(self):
        article = _article(slug=Slug("kept-000001"))

        assert article.slug.root == "kept-000001"

    def test_copy_does_not_regenerate_slug(self):
        article = _article()

        updated = article.model_copy(update={"title": "Something else"})

        assert updated.slug == article.slug

    def test_negative_favorites_count_rejected(self):
        with pytest.raises(ValidationError):
            _article(favorites_count=-1)

    def test_frozen(self):
        article = _article()

        with pytest.raises(ValidationError):
            article.title = "changed"
