"""Admin reporting routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from cinema.application.usecase.stats import (
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
)
from cinema.domain.service import JWTService
from cinema.interface.error import error_detail, to_http_exception, unauthenticated

router = APIRouter(prefix="/stats", tags=["stats"], route_class=DishkaRoute)


@router.get("/comments", response_model=GetCommentStatsResponse)
async def get_comment_stats(
    stats_use_case: FromDishka[GetCommentStatsUseCase],
    jwt_service: FromDishka[JWTService],
    recent_limit: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentStatsResponse:
    """Comment totals and the latest top-level comments.

    Admin only.
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated()
    if not actor.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=error_detail("unauthorized", "Admin role required"),
        )

    try:
        request = GetCommentStatsRequest(recent_limit=recent_limit)
    except ValueError as e:
        raise to_http_exception(e) from e
    return await stats_use_case.execute(request)
