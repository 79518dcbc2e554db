"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from cinema.application.usecase.base import BaseUseCase
from cinema.domain.service import CommentService
from cinema.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_id: UUID  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    removed_count: int


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for deleting a comment and its whole subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
        """
        removed = await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return DeleteCommentResponse(success=True, removed_count=removed)
