"""Article aggregate root."""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, CommentId, Slug, UserId
from conduit.util.slug import slugify


class Article(DomainModel):
    """Article aggregate root.

    Business rules:
    - ``slug`` is derived from the title the first time an article is
      validated without one, and never regenerated afterwards
    - ``tag_list`` keeps the order and duplicates the author entered
    - ``comment_ids`` lists comments in creation order
    - ``favorites_count`` is derived: it is recomputed from the users'
      favorites, never incremented in place
    """

    id: ArticleId
    slug: Slug
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    body: str = Field(min_length=1)
    tag_list: list[str] = Field(default_factory=list)
    author_id: UserId
    comment_ids: list[CommentId] = Field(default_factory=list)
    favorites_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def assign_slug(cls, data: Any) -> Any:
        """Generate a slug for a new article that does not have one yet."""
        if isinstance(data, dict) and not data.get("slug") and data.get("title"):
            data = {**data, "slug": slugify(data["title"])}
        return data
