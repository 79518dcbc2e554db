"""Comment statistics use case for the admin dashboard."""

from datetime import date, datetime, time, timedelta

import logfire
from pydantic import BaseModel, Field

from cinema.application.usecase.base import BaseUseCase
from cinema.config import CommentSettings
from cinema.domain.service import CommentService, MovieService, UserService


class GetCommentStatsRequest(BaseModel):
    """Get comment stats request."""

    recent_limit: int | None = Field(default=None, ge=1, le=100)


class RecentCommentItem(BaseModel):
    """Recent top-level comment with its movie and author names."""

    id: str
    content: str
    movie_id: str
    movie_name: str | None
    movie_slug: str | None
    user_name: str | None
    created_at: datetime


class GetCommentStatsResponse(BaseModel):
    """Get comment stats response."""

    total: int
    today: int
    recent: list[RecentCommentItem]


class GetCommentStatsUseCase(
    BaseUseCase[GetCommentStatsRequest, GetCommentStatsResponse]
):
    """Use case for the comment section of the admin dashboard."""

    def __init__(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        """Initialize use case.

        Args:
            comment_service: Comment domain service
            movie_service: Movie domain service
            user_service: User domain service
            settings: Comment settings (default recent limit)
        """
        self.comment_service = comment_service
        self.movie_service = movie_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GetCommentStatsRequest) -> GetCommentStatsResponse:
        """Execute get comment stats flow.

        "Today" is the current local calendar day, counted as the
        half-open range from midnight to the next midnight.

        Args:
            request: Stats request

        Returns:
            Totals and the most recent top-level comments
        """
        recent_limit = request.recent_limit or self.settings.recent_limit

        with logfire.span("get_comment_stats.execute", recent_limit=recent_limit):
            start_of_day = datetime.combine(date.today(), time.min)
            end_of_day = start_of_day + timedelta(days=1)

            total = await self.comment_service.count_all()
            today = await self.comment_service.count_by_date_range(
                start_of_day, end_of_day
            )
            recent = await self.comment_service.recent_top_level(recent_limit)

            movies = await self.movie_service.get_movies([c.movie_id for c in recent])
            authors = await self.user_service.get_authors([c.user_id for c in recent])

            items = []
            for comment in recent:
                movie = movies.get(comment.movie_id)
                author = authors.get(comment.user_id)
                items.append(
                    RecentCommentItem(
                        id=str(comment.id),
                        content=comment.content,
                        movie_id=str(comment.movie_id),
                        movie_name=movie.name if movie else None,
                        movie_slug=movie.slug if movie else None,
                        user_name=author.full_name if author else None,
                        created_at=comment.created_at,
                    )
                )

            logfire.info("Comment stats computed", total=total, today=today)
            return GetCommentStatsResponse(total=total, today=today, recent=items)
