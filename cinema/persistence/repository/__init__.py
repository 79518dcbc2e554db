"""PostgreSQL repository implementations."""

from cinema.persistence.repository.comment import PostgresCommentRepository
from cinema.persistence.repository.movie import PostgresMovieRepository
from cinema.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresMovieRepository",
    "PostgresUserRepository",
]
