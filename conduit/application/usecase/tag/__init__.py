"""Tag use cases."""

from .list_tags import ListTagsResponse, ListTagsUseCase

__all__ = ["ListTagsResponse", "ListTagsUseCase"]
