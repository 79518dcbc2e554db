"""Domain value objects for the cinema API."""

from cinema.domain.value.identifiers import CommentId, MovieId, UserId
from cinema.domain.value.types import Actor, CommentAuthor, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "MovieId",
    "CommentId",
    # Types
    "Actor",
    "CommentAuthor",
    "UserRole",
]
