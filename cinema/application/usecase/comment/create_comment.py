"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from cinema.application.usecase.base import BaseUseCase
from cinema.domain.error import NotFoundError
from cinema.domain.service import (
    CommentService,
    ContentSanitizer,
    MovieService,
    UserService,
)
from cinema.domain.value import CommentId, MovieId, UserId

from .common import CommentItem, clean_content


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    movie_id: UUID
    user_id: UUID  # From the authenticated actor
    content: str
    parent_comment_id: UUID | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CommentItem]):
    """Use case for commenting on a movie or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        sanitizer: ContentSanitizer,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            movie_service: Movie domain service
            user_service: User domain service
            sanitizer: Content sanitizer
        """
        self.comment_service = comment_service
        self.movie_service = movie_service
        self.user_service = user_service
        self.sanitizer = sanitizer

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Resolve the author
        2. Verify the movie exists
        3. Strip markup from the content
        4. Create the comment (service validates the parent and updates counters)

        Args:
            request: Create comment request

        Returns:
            Created comment with its author

        Raises:
            NotFoundError: If user, movie or parent comment not found
            ValidationError: If content is empty after sanitizing or too long
        """
        with logfire.span(
            "create_comment.execute",
            movie_id=str(request.movie_id),
            user_id=str(request.user_id),
        ):
            user = await self.user_service.get_by_id(UserId(request.user_id))

            movie_id = MovieId(request.movie_id)
            movie = await self.movie_service.get_movie(movie_id)
            if not movie:
                raise NotFoundError("Movie", str(request.movie_id))

            content = clean_content(self.sanitizer, request.content)

            comment = await self.comment_service.create_comment(
                movie_id=movie_id,
                user_id=user.id,
                content=content,
                parent_comment_id=(
                    CommentId(request.parent_comment_id)
                    if request.parent_comment_id
                    else None
                ),
            )

            return CommentItem.from_comment(comment, user.to_author())
