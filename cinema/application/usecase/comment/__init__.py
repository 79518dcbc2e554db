"""Comment use cases."""

from .common import CommentItem, CommentPage
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .list_comment_replies import ListCommentRepliesRequest, ListCommentRepliesUseCase
from .list_top_level_comments import (
    ListTopLevelCommentsRequest,
    ListTopLevelCommentsUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentPage",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListCommentRepliesRequest",
    "ListCommentRepliesUseCase",
    "ListTopLevelCommentsRequest",
    "ListTopLevelCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
