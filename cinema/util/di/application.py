"""Application layer DI providers."""

from dishka import Scope, provide

from cinema.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentRepliesUseCase,
    ListTopLevelCommentsUseCase,
    UpdateCommentUseCase,
)
from cinema.application.usecase.stats import GetCommentStatsUseCase
from cinema.config import CommentSettings
from cinema.domain.service import (
    CommentService,
    ContentSanitizer,
    MovieService,
    UserService,
)
from cinema.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        sanitizer: ContentSanitizer,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            movie_service=movie_service,
            user_service=user_service,
            sanitizer=sanitizer,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        sanitizer: ContentSanitizer,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            sanitizer=sanitizer,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_top_level_comments_use_case(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> ListTopLevelCommentsUseCase:
        """Provide list top-level comments use case."""
        return ListTopLevelCommentsUseCase(
            comment_service=comment_service,
            movie_service=movie_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comment_replies_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> ListCommentRepliesUseCase:
        """Provide list comment replies use case."""
        return ListCommentRepliesUseCase(
            comment_service=comment_service,
            user_service=user_service,
            settings=settings,
        )

    # Reporting use cases
    @provide(scope=Scope.REQUEST)
    def get_comment_stats_use_case(
        self,
        comment_service: CommentService,
        movie_service: MovieService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> GetCommentStatsUseCase:
        """Provide comment stats use case."""
        return GetCommentStatsUseCase(
            comment_service=comment_service,
            movie_service=movie_service,
            user_service=user_service,
            settings=settings,
        )
