"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .movie_service import MovieService
from .sanitizer import ContentSanitizer
from .user_service import UserService

__all__ = [
    "CommentService",
    "ContentSanitizer",
    "JWTService",
    "MovieService",
    "Service",
    "UserService",
]
