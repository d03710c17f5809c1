"""Comment entity."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an article.

    Owned by its author for deletion rights; removed together with its
    reference in the article's comment sequence.
    """

    id: CommentId
    body: str = Field(min_length=1)
    author_id: UserId
    article_id: ArticleId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
