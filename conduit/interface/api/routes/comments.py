"""Comment routes, nested under articles."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from conduit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    MultipleCommentsResponse,
)
from conduit.interface.api.auth import session_token

router = APIRouter(
    prefix="/articles/{slug}/comments", tags=["comments"], route_class=DishkaRoute
)


class NewComment(BaseModel):
    """Fields of a new comment."""

    body: str = ""


class NewCommentBody(BaseModel):
    """``{"comment": {...}}`` body."""

    comment: NewComment


@router.post("", response_model=CommentResponse)
async def add_comment(
    slug: str,
    body: NewCommentBody,
    use_case: FromDishka[AddCommentUseCase],
    token: str | None = Depends(session_token),
) -> CommentResponse:
    """Comment on an article. Requires authentication."""
    return await use_case.execute(
        AddCommentRequest(slug=slug, token=token, body=body.comment.body)
    )


@router.get("", response_model=MultipleCommentsResponse)
async def list_comments(
    slug: str,
    use_case: FromDishka[ListCommentsUseCase],
    token: str | None = Depends(session_token),
) -> MultipleCommentsResponse:
    """List an article's comments, newest first."""
    return await use_case.execute(ListCommentsRequest(slug=slug, token=token))


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    slug: str,
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
    token: str | None = Depends(session_token),
) -> Response:
    """Delete a comment. Only its author may do this."""
    await use_case.execute(
        DeleteCommentRequest(slug=slug, comment_id=comment_id, token=token)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
