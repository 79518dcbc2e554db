"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from cinema.application.usecase.comment import (
    CommentItem,
    CommentPage,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentRepliesRequest,
    ListCommentRepliesUseCase,
    ListTopLevelCommentsRequest,
    ListTopLevelCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from cinema.domain.error import DomainError
from cinema.domain.service import JWTService
from cinema.interface.error import to_http_exception, unauthenticated

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=20000)  # Raw, may contain markup
    parent_comment_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=20000)


@router.post(
    "/movies/{movie_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    movie_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a movie or reply to another comment.

    Requires authentication. Replies deeper than the nesting limit are
    attached to the thread root.

    Args:
        movie_id: Movie UUID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment with its author

    Raises:
        HTTPException: If not authenticated, movie or parent not found, or content invalid
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to create comments")

    try:
        use_case_request = CreateCommentRequest(
            movie_id=movie_id,
            user_id=actor.user_id,
            content=request.content,
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment creation failed", movie_id=movie_id, error=str(e))
        raise to_http_exception(e) from e


@router.get("/movies/{movie_id}/comments", response_model=CommentPage)
async def list_comments(
    movie_id: str,
    list_use_case: FromDishka[ListTopLevelCommentsUseCase],
    page: int = 1,
    limit: int | None = None,
) -> CommentPage:
    """List a movie's top-level comments, newest first.

    Args:
        movie_id: Movie UUID
        list_use_case: List top-level comments use case from DI
        page: 1-based page number
        limit: Page size (server default when omitted)

    Returns:
        Page of top-level comments
    """
    try:
        use_case_request = ListTopLevelCommentsRequest(
            movie_id=movie_id, page=page, limit=limit
        )
        return await list_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Listing comments failed", movie_id=movie_id, error=str(e))
        raise to_http_exception(e) from e


@router.get(
    "/movies/{movie_id}/comments/{comment_id}/replies", response_model=CommentPage
)
async def list_replies(
    movie_id: str,
    comment_id: str,
    replies_use_case: FromDishka[ListCommentRepliesUseCase],
    page: int = 1,
    limit: int | None = None,
    include_nested_replies: bool = False,
) -> CommentPage:
    """List replies to a comment.

    With ``include_nested_replies`` on a top-level comment the whole thread
    is returned flattened, shallowest level first.

    Args:
        movie_id: Movie UUID
        comment_id: Parent comment UUID
        replies_use_case: List replies use case from DI
        page: 1-based page number
        limit: Page size (server default when omitted)
        include_nested_replies: Flatten the thread

    Returns:
        Page of replies
    """
    try:
        use_case_request = ListCommentRepliesRequest(
            parent_comment_id=comment_id,
            movie_id=movie_id,
            page=page,
            limit=limit,
            include_nested_replies=include_nested_replies,
        )
        return await replies_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Listing replies failed", comment_id=comment_id, error=str(e))
        raise to_http_exception(e) from e


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Replacement content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment

    Raises:
        HTTPException: If not authenticated, not the author, or comment not found
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id, user_id=actor.user_id, content=request.content
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment update failed", comment_id=comment_id, error=str(e))
        raise to_http_exception(e) from e


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Only the comment author can delete.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Success flag and number of removed comments
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise unauthenticated("Authentication required to delete comments")

    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id, user_id=actor.user_id
        )
        return await delete_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment deletion failed", comment_id=comment_id, error=str(e))
        raise to_http_exception(e) from e
