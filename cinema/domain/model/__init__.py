"""Domain model entities for the cinema API."""

from cinema.domain.model.comment import MAX_NESTING_LEVEL, Comment
from cinema.domain.model.movie import Movie
from cinema.domain.model.user import User

__all__ = [
    "Comment",
    "MAX_NESTING_LEVEL",
    "Movie",
    "User",
]
