"""Unfavorite article use case."""

import logfire

from conduit.application.view import project_article
from conduit.domain.service import (
    ArticleService,
    AuthService,
    SocialGraphService,
    UserService,
)

from .create_article import ArticleResponse
from .favorite_article import FavoriteArticleRequest


class UnfavoriteArticleUseCase:
    """Use case for removing an article from the viewer's favorites."""

    def __init__(
        self,
        auth_service: AuthService,
        article_service: ArticleService,
        user_service: UserService,
        social_graph_service: SocialGraphService,
    ) -> None:
        """Initialize unfavorite article use case.

        Args:
            auth_service: Authentication domain service
            article_service: Article domain service
            user_service: User domain service
            social_graph_service: Social graph domain service
        """
        self.auth_service = auth_service
        self.article_service = article_service
        self.user_service = user_service
        self.social_graph_service = social_graph_service

    async def execute(self, request: FavoriteArticleRequest) -> ArticleResponse:
        """Remove the article from the viewer's favorites and recompute the count.

        Unfavoriting an article that was not a favorite succeeds.

        Raises:
            NotAuthenticatedError: If the token is missing or invalid
            NotFoundError: If the slug does not resolve
        """
        viewer = await self.auth_service.resolve_user(request.token)
        article = await self.article_service.get_by_slug(request.slug)

        with logfire.span(
            "unfavorite_article.execute", user_id=str(viewer.id), slug=request.slug
        ):
            viewer, article = await self.social_graph_service.unfavorite(
                viewer, article
            )
            author = await self.user_service.get_by_id(article.author_id)
            return ArticleResponse(article=project_article(article, author, viewer))
