"""Article routes, including favorites."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from conduit.application.usecase.article import (
    ArticleResponse,
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    FavoriteArticleRequest,
    FavoriteArticleUseCase,
    FeedArticlesRequest,
    FeedArticlesUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
    MultipleArticlesResponse,
    UnfavoriteArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from conduit.domain.value import DEFAULT_PAGE_LIMIT
from conduit.interface.api.auth import session_token

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class ArticleFields(BaseModel):
    """Base for article bodies; accepts ``tagList`` as well as ``tag_list``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewArticle(ArticleFields):
    """Fields of a new article."""

    title: str = ""
    description: str = ""
    body: str = ""
    tag_list: list[str] = Field(default_factory=list)


class NewArticleBody(BaseModel):
    """``{"article": {...}}`` body for creation."""

    article: NewArticle


class UpdateArticle(ArticleFields):
    """Updatable article fields; omitted fields are left unchanged."""

    title: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None
    tag_list: Optional[list[str]] = None


class UpdateArticleBody(BaseModel):
    """``{"article": {...}}`` body for updates."""

    article: UpdateArticle


@router.get("", response_model=MultipleArticlesResponse)
async def list_articles(
    use_case: FromDishka[ListArticlesUseCase],
    tag: Optional[str] = None,
    author: Optional[str] = None,
    favorited: Optional[str] = None,
    limit: int = Query(default=DEFAULT_PAGE_LIMIT, ge=0),
    offset: int = Query(default=0, ge=0),
    token: str | None = Depends(session_token),
) -> MultipleArticlesResponse:
    """List articles, newest first.

    Args:
        use_case: List articles use case (injected)
        tag: Only articles carrying this tag
        author: Only articles by this username
        favorited: Only articles favorited by this username
        limit: Page size (0 for no limit)
        offset: Number of articles to skip
        token: Optional session token

    Example:
        GET /api/articles?tag=dragons&limit=10
    """
    return await use_case.execute(
        ListArticlesRequest(
            token=token,
            tag=tag,
            author=author,
            favorited=favorited,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/feed", response_model=MultipleArticlesResponse)
async def feed(
    use_case: FromDishka[FeedArticlesUseCase],
    limit: int = Query(default=DEFAULT_PAGE_LIMIT, ge=0),
    offset: int = Query(default=0, ge=0),
    token: str | None = Depends(session_token),
) -> MultipleArticlesResponse:
    """List articles by followed authors. Requires authentication."""
    return await use_case.execute(
        FeedArticlesRequest(token=token, limit=limit, offset=offset)
    )


@router.post("", response_model=ArticleResponse)
async def create_article(
    body: NewArticleBody,
    use_case: FromDishka[CreateArticleUseCase],
    token: str | None = Depends(session_token),
) -> ArticleResponse:
    """Publish an article. Requires authentication."""
    return await use_case.execute(
        CreateArticleRequest(token=token, **body.article.model_dump())
    )


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    use_case: FromDishka[GetArticleUseCase],
    token: str | None = Depends(session_token),
) -> ArticleResponse:
    """Get one article. Authentication is optional."""
    return await use_case.execute(GetArticleRequest(slug=slug, token=token))


@router.put("/{slug}", response_model=ArticleResponse)
async def update_article(
    slug: str,
    body: UpdateArticleBody,
    use_case: FromDishka[UpdateArticleUseCase],
    token: str | None = Depends(session_token),
) -> ArticleResponse:
    """Edit an article. Only its author may do this."""
    return await use_case.execute(
        UpdateArticleRequest(
            slug=slug, token=token, **body.article.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    slug: str,
    use_case: FromDishka[DeleteArticleUseCase],
    token: str | None = Depends(session_token),
) -> Response:
    """Delete an article and its comments. Only its author may do this."""
    await use_case.execute(DeleteArticleRequest(slug=slug, token=token))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{slug}/favorite", response_model=ArticleResponse)
async def favorite_article(
    slug: str,
    use_case: FromDishka[FavoriteArticleUseCase],
    token: str | None = Depends(session_token),
) -> ArticleResponse:
    """Add an article to the viewer's favorites."""
    return await use_case.execute(FavoriteArticleRequest(slug=slug, token=token))


@router.delete("/{slug}/favorite", response_model=ArticleResponse)
async def unfavorite_article(
    slug: str,
    use_case: FromDishka[UnfavoriteArticleUseCase],
    token: str | None = Depends(session_token),
) -> ArticleResponse:
    """Remove an article from the viewer's favorites."""
    return await use_case.execute(FavoriteArticleRequest(slug=slug, token=token))
