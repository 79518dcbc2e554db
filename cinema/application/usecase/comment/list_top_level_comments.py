"""List top-level comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from cinema.application.usecase.base import BaseUseCase
from cinema.config import CommentSettings
from cinema.domain.error import NotFoundError
from cinema.domain.service import CommentService, MovieService, UserService
from cinema.domain.value import MovieId

from .common import CommentItem, CommentPage, resolve_limit


class ListTopLevelCommentsRequest(BaseModel):
    """List top-level comments request."""

    movie_id: UUID
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)  # Defaults to configured page size


class ListTopLevelCommentsUseCase(
    BaseUseCase[ListTopLevelCommentsRequest, CommentPage]
):
    """Use case for paging through a movie's top-level comments."""

    def __init__(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        """Initialize list top-level comments use case.

        Args:
            comment_service: Comment domain service
            movie_service: Movie domain service
            user_service: User domain service for author projections
            settings: Comment listing settings
        """
        self.comment_service = comment_service
        self.movie_service = movie_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListTopLevelCommentsRequest) -> CommentPage:
        """Execute list top-level comments flow.

        Args:
            request: Movie and pagination parameters

        Returns:
            Page of top-level comments, newest first

        Raises:
            NotFoundError: If movie not found
            ValidationError: If limit exceeds the configured maximum
        """
        limit = resolve_limit(request.limit, self.settings)

        with logfire.span(
            "list_top_level_comments.execute",
            movie_id=str(request.movie_id),
            page=request.page,
            limit=limit,
        ):
            movie_id = MovieId(request.movie_id)
            if not await self.movie_service.get_movie(movie_id):
                raise NotFoundError("Movie", str(request.movie_id))

            comments, total = await self.comment_service.list_top_level(
                movie_id, page=request.page, limit=limit
            )
            authors = await self.user_service.get_authors([c.user_id for c in comments])

            items = [CommentItem.from_comment(c, authors.get(c.user_id)) for c in comments]
            return CommentPage.build(items, total, request.page, limit)
