"""Shared fixtures for unit tests.

Services are wired by hand against in-memory repositories so each test
can reach into the stores directly.
"""

import pytest

from conduit.config import AuthSettings
from conduit.domain.model import Article, User
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
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def article_repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def comment_repository() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


@pytest.fixture
def password_service() -> PasswordService:
    return PasswordService()


@pytest.fixture
def jwt_service(auth_settings: AuthSettings) -> JWTService:
    return JWTService(auth_settings)


@pytest.fixture
def authorization_service() -> AuthorizationService:
    return AuthorizationService()


@pytest.fixture
def user_service(user_repository, password_service) -> UserService:
    return UserService(user_repository, password_service)


@pytest.fixture
def auth_service(user_repository, password_service, jwt_service) -> AuthService:
    return AuthService(user_repository, password_service, jwt_service)


@pytest.fixture
def article_service(
    article_repository, comment_repository, authorization_service
) -> ArticleService:
    return ArticleService(article_repository, comment_repository, authorization_service)


@pytest.fixture
def comment_service(
    comment_repository, article_repository, authorization_service
) -> CommentService:
    return CommentService(comment_repository, article_repository, authorization_service)


@pytest.fixture
def social_graph_service(user_repository, article_repository) -> SocialGraphService:
    return SocialGraphService(user_repository, article_repository)


@pytest.fixture
def feed_service(article_repository, user_repository) -> FeedService:
    return FeedService(article_repository, user_repository)


@pytest.fixture
def register(user_service):
    """Register a user named ``username`` with a derived email."""

    async def _register(username: str, password: str = "secret") -> User:
        return await user_service.register(
            username, f"{username}@example.com", password
        )

    return _register


@pytest.fixture
def publish(article_service):
    """Publish an article by ``author`` with filler description and body."""

    async def _publish(
        author: User, title: str, tag_list: list[str] | None = None
    ) -> Article:
        return await article_service.create_article(
            author,
            title=title,
            description=f"About {title}",
            body=f"{title} body",
            tag_list=tag_list,
        )

    return _publish
