"""List comment replies use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from cinema.application.usecase.base import BaseUseCase
from cinema.config import CommentSettings
from cinema.domain.service import CommentService, UserService
from cinema.domain.value import CommentId, MovieId

from .common import CommentItem, CommentPage, resolve_limit


class ListCommentRepliesRequest(BaseModel):
    """List comment replies request."""

    parent_comment_id: UUID
    movie_id: UUID
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    include_nested_replies: bool = False  # Flatten the whole thread under a root


class ListCommentRepliesUseCase(
    BaseUseCase[ListCommentRepliesRequest, CommentPage]
):
    """Use case for paging through the replies of a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListCommentRepliesRequest) -> CommentPage:
        """Execute list replies flow.

        Replies are ordered by nesting level, then newest first.

        Raises:
            NotFoundError: If the parent comment is not in the movie
            ValidationError: If limit exceeds the configured maximum
        """
        limit = resolve_limit(request.limit, self.settings)

        with logfire.span(
            "list_comment_replies.execute",
            parent_comment_id=str(request.parent_comment_id),
            include_nested_replies=request.include_nested_replies,
            page=request.page,
            limit=limit,
        ):
            replies, total = await self.comment_service.list_replies(
                CommentId(request.parent_comment_id),
                MovieId(request.movie_id),
                page=request.page,
                limit=limit,
                include_nested_replies=request.include_nested_replies,
            )
            authors = await self.user_service.get_authors([c.user_id for c in replies])

            items = [CommentItem.from_comment(c, authors.get(c.user_id)) for c in replies]
            return CommentPage.build(items, total, request.page, limit)
