"""Domain layer DI providers."""

from dishka import Scope, provide

from conduit.config import AuthSettings
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from conduit.domain.service import (
    ArticleService,
    AuthorizationService,
    AuthService,
    CommentService,
    FeedService,
    JWTService,
    PasswordService,
    SocialGraphService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services that touch repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Stateless services live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide credential domain service."""
        return PasswordService()

    @provide(scope=Scope.APP)
    def get_authorization_service(self) -> AuthorizationService:
        """Provide ownership guard."""
        return AuthorizationService()

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_article_service(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
        authorization_service: AuthorizationService,
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository,
            comment_repository=comment_repository,
            authorization_service=authorization_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        authorization_service: AuthorizationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
            authorization_service=authorization_service,
        )

    @provide
    def get_social_graph_service(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> SocialGraphService:
        """Provide social graph domain service."""
        return SocialGraphService(
            user_repository=user_repository, article_repository=article_repository
        )

    @provide
    def get_feed_service(
        self,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
    ) -> FeedService:
        """Provide feed composition domain service."""
        return FeedService(
            article_repository=article_repository, user_repository=user_repository
        )
