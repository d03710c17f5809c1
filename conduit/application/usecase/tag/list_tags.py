"""List tags use case."""

from pydantic import BaseModel

from conduit.domain.service import ArticleService


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase:
    """Use case for listing every tag in use."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize list tags use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self) -> ListTagsResponse:
        """Return the distinct tags across all articles, sorted."""
        return ListTagsResponse(tags=await self.article_service.list_tags())
