"""Article use cases."""

from .create_article import ArticleResponse, CreateArticleRequest, CreateArticleUseCase
from .delete_article import DeleteArticleRequest, DeleteArticleUseCase
from .favorite_article import FavoriteArticleRequest, FavoriteArticleUseCase
from .feed_articles import FeedArticlesRequest, FeedArticlesUseCase
from .get_article import GetArticleRequest, GetArticleUseCase
from .list_articles import (
    ListArticlesRequest,
    ListArticlesUseCase,
    MultipleArticlesResponse,
)
from .unfavorite_article import UnfavoriteArticleUseCase
from .update_article import UpdateArticleRequest, UpdateArticleUseCase

__all__ = [
    "ArticleResponse",
    "CreateArticleRequest",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleUseCase",
    "FavoriteArticleRequest",
    "FavoriteArticleUseCase",
    "FeedArticlesRequest",
    "FeedArticlesUseCase",
    "GetArticleRequest",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesUseCase",
    "MultipleArticlesResponse",
    "UnfavoriteArticleUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
