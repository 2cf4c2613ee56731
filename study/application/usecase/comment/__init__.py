"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .items import CommentItem, CommentNodeItem
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
