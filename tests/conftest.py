"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from cinema.domain.model import Comment, Movie, User
from cinema.domain.value import CommentId, MovieId, UserId, UserRole

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(full_name: str = "Test User", role: UserRole = UserRole.MEMBER) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        full_name=full_name,
        email=f"{full_name.lower().replace(' ', '.')}@example.com",
        role=role,
    )


def make_movie(name: str = "Test Movie") -> Movie:
    """Build a movie with a fresh ID and a slug derived from the name."""
    return Movie(
        id=MovieId(uuid4()),
        name=name,
        slug=f"{name.lower().replace(' ', '-')}-{uuid4().hex[:6]}",
    )


def make_comment(
    movie_id: MovieId,
    user_id: UserId,
    content: str = "Test comment",
    parent: Comment | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment positioned under ``parent`` without touching counters.

    Useful for seeding repositories directly.
    """
    now = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        movie_id=movie_id,
        user_id=user_id,
        content=content,
        parent_comment_id=parent.id if parent else None,
        root_parent_comment_id=(
            (parent.root_parent_comment_id or parent.id) if parent else None
        ),
        nesting_level=parent.nesting_level + 1 if parent else 0,
        created_at=now,
        updated_at=now,
    )
