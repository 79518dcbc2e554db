"""Domain layer DI providers."""

from dishka import Scope, provide

from cinema.config import AuthSettings
from cinema.domain.repository import (
    CommentRepository,
    MovieRepository,
    UserRepository,
)
from cinema.domain.service import (
    CommentService,
    ContentSanitizer,
    JWTService,
    MovieService,
    UserService,
)
from cinema.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_content_sanitizer(self) -> ContentSanitizer:
        return ContentSanitizer()

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_movie_service(self, movie_repository: MovieRepository) -> MovieService:
        """Provide movie domain service."""
        return MovieService(movie_repository=movie_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
