"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .movie import InMemoryMovieRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryMovieRepository",
    "InMemoryUserRepository",
]
