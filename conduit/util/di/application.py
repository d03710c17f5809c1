"""Application layer DI providers."""

from dishka import Scope, provide

from conduit.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    FavoriteArticleUseCase,
    FeedArticlesUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    UnfavoriteArticleUseCase,
    UpdateArticleUseCase,
)
from conduit.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from conduit.application.usecase.profile import (
    FollowUserUseCase,
    GetProfileUseCase,
    UnfollowUserUseCase,
)
from conduit.application.usecase.tag import ListTagsUseCase
from conduit.application.usecase.user import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from conduit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use case constructors take only services and repositories, so dishka
    builds them from their type hints.
    """

    scope = Scope.REQUEST

    # User use cases
    register_user = provide(RegisterUserUseCase)
    login_user = provide(LoginUserUseCase)
    get_current_user = provide(GetCurrentUserUseCase)
    update_user = provide(UpdateUserUseCase)

    # Profile use cases
    get_profile = provide(GetProfileUseCase)
    follow_user = provide(FollowUserUseCase)
    unfollow_user = provide(UnfollowUserUseCase)

    # Article use cases
    create_article = provide(CreateArticleUseCase)
    get_article = provide(GetArticleUseCase)
    update_article = provide(UpdateArticleUseCase)
    delete_article = provide(DeleteArticleUseCase)
    list_articles = provide(ListArticlesUseCase)
    feed_articles = provide(FeedArticlesUseCase)
    favorite_article = provide(FavoriteArticleUseCase)
    unfavorite_article = provide(UnfavoriteArticleUseCase)

    # Comment use cases
    add_comment = provide(AddCommentUseCase)
    list_comments = provide(ListCommentsUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Tag use cases
    list_tags = provide(ListTagsUseCase)
