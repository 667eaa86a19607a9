"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .get_comments import (
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    GetCommentUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "GetCommentRequest",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetCommentThreadResponse",
    "GetCommentThreadUseCase",
    "GetCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
