"""User domain service."""

import logfire

from cinema.domain.error import NotFoundError
from cinema.domain.model import User
from cinema.domain.repository import UserRepository
from cinema.domain.value import CommentAuthor, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_authors(self, user_ids: list[UserId]) -> dict[UserId, CommentAuthor]:
        """Batch load author projections keyed by user ID.

        Unknown users are left out of the result; callers render such
        comments without an author.

        Args:
            user_ids: User IDs, duplicates allowed

        Returns:
            Mapping of user ID to author projection
        """
        if not user_ids:
            return {}
        with logfire.span("user_service.get_authors", count=len(user_ids)):
            users = await self.user_repository.find_by_ids(list(set(user_ids)))
            return {user.id: user.to_author() for user in users}
