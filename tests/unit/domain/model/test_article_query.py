"""Tests for ArticleQuery."""

from uuid import uuid4

from conduit.domain.model import Article
from conduit.domain.repository import ArticleQuery


def _article(author_id=None, tag_list=None) -> Article:
    return Article(
        id=uuid4(),
        title="Dragons",
        description="d",
        body="b",
        author_id=author_id or uuid4(),
        tag_list=tag_list or [],
    )


class TestArticleQuery:
    """Tests for filter matching."""

    def test_empty_query_matches_everything(self):
        query = ArticleQuery()

        assert not query.matches_nothing
        assert query.matches(_article())

    def test_empty_id_set_matches_nothing(self):
        assert ArticleQuery(author_ids=frozenset()).matches_nothing
        assert ArticleQuery(article_ids=frozenset()).matches_nothing

    def test_tag_must_be_present(self):
        query = ArticleQuery(tag="dragons")

        assert query.matches(_article(tag_list=["training", "dragons"]))
        assert not query.matches(_article(tag_list=["training"]))

    def test_author_ids(self):
        author_id = uuid4()
        query = ArticleQuery(author_ids=frozenset({author_id}))

        assert query.matches(_article(author_id=author_id))
        assert not query.matches(_article())
