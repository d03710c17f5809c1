"""Domain services."""

from .article_service import ArticleService
from .auth_service import AuthService
from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .jwt_service import JWTService
from .password_service import PasswordService
from .social_graph_service import SocialGraphService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "AuthService",
    "AuthorizationService",
    "CommentService",
    "FeedService",
    "JWTService",
    "PasswordService",
    "Service",
    "SocialGraphService",
    "UserService",
]
