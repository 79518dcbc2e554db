"""Repository interfaces for the cinema domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from cinema.domain.repository.comment import CommentRepository
from cinema.domain.repository.movie import MovieRepository
from cinema.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "MovieRepository",
    "UserRepository",
]
