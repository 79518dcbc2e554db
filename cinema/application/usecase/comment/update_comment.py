"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from cinema.application.usecase.base import BaseUseCase
from cinema.domain.service import CommentService, ContentSanitizer, UserService
from cinema.domain.value import CommentId, UserId

from .common import CommentItem, clean_content


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: UUID
    user_id: UUID  # Current user ID (must be author)
    content: str


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, CommentItem]):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        sanitizer: ContentSanitizer,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            user_service: User service for the author projection
            sanitizer: Content sanitizer
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.sanitizer = sanitizer

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
            ValidationError: If content is empty after sanitizing or too long
        """
        content = clean_content(self.sanitizer, request.content)

        updated = await self.comment_service.update_content(
            CommentId(request.comment_id), UserId(request.user_id), content
        )

        authors = await self.user_service.get_authors([updated.user_id])
        return CommentItem.from_comment(updated, authors.get(updated.user_id))
