"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from cinema.domain.value.identifiers import UserId


class ValueObject(BaseModel):
    """Immutable, compared by value."""

    model_config = ConfigDict(frozen=True)


class UserRole(str, Enum):
    """Role of a registered user."""

    MEMBER = "member"
    ADMIN = "admin"


class Actor(ValueObject):
    """Authenticated identity supplied by the auth layer.

    The comment engine trusts this identity and performs its own
    ownership checks against ``user_id``.
    """

    user_id: UserId
    role: UserRole = UserRole.MEMBER
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class CommentAuthor(ValueObject):
    """Minimal author projection joined onto returned comments."""

    id: UserId
    full_name: str
    avatar_url: str | None = None
