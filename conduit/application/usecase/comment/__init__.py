"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentResponse
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsUseCase,
    MultipleCommentsResponse,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "MultipleCommentsResponse",
]
