"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from cinema.domain.model import Comment, Movie, User
from cinema.domain.value import CommentId, MovieId, UserId, UserRole


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        full_name=row["full_name"],
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row.get("role") or UserRole.MEMBER.value),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_movie(row: Dict[str, Any]) -> Movie:
    """Convert database row to Movie domain model."""
    return Movie(
        id=MovieId(_uuid(row["id"])),
        name=row["name"],
        slug=row["slug"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def movie_to_dict(movie: Movie) -> Dict[str, Any]:
    """Convert Movie domain model to database dict."""
    return movie.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    root_id = row.get("root_parent_comment_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        movie_id=MovieId(_uuid(row["movie_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        parent_comment_id=CommentId(_uuid(parent_id)) if parent_id else None,
        root_parent_comment_id=CommentId(_uuid(root_id)) if root_id else None,
        nesting_level=row["nesting_level"],
        reply_count=row["reply_count"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()
