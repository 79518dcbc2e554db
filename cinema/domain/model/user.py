"""User entity.

Accounts are managed elsewhere; the comment engine only reads users to
resolve authors and build author projections.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cinema.domain.model.common import DomainModel
from cinema.domain.value import CommentAuthor, UserId, UserRole


class User(DomainModel):
    """Registered user."""

    id: UserId
    full_name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.MEMBER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_author(self) -> CommentAuthor:
        """Project the user onto the fields shown next to a comment."""
        return CommentAuthor(
            id=self.id, full_name=self.full_name, avatar_url=self.avatar_url
        )
