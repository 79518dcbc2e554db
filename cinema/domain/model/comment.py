"""Comment entity.

Comments form a bounded-depth reply tree over one flat collection. Nesting is
encoded in two references rather than physical nesting:

- parent_comment_id: immediate parent (None for top-level)
- root_parent_comment_id: topmost ancestor of the chain (None for top-level)

Replies to a comment already at MAX_NESTING_LEVEL are attached to the root
instead, so chains never grow deeper than MAX_NESTING_LEVEL.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from cinema.domain.model.common import DomainModel
from cinema.domain.value import CommentId, MovieId, UserId

MAX_NESTING_LEVEL = 5
MAX_CONTENT_LENGTH = 5000


class Comment(DomainModel):
    """Comment entity.

    ``reply_count`` is denormalized: a top-level comment counts all of its
    live descendants, a nested comment counts its direct replies. It is only
    ever changed by creating or deleting other comments.
    """

    id: CommentId
    movie_id: MovieId
    user_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    root_parent_comment_id: Optional[CommentId] = None
    nesting_level: int = Field(default=0, ge=0, le=MAX_NESTING_LEVEL)
    reply_count: int = Field(default=0, ge=0)
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_nesting_fields(self) -> "Comment":
        """Parent, root and level must agree on whether this is top-level."""
        has_parent = self.parent_comment_id is not None
        has_root = self.root_parent_comment_id is not None
        is_nested = self.nesting_level > 0
        if not (has_parent == has_root == is_nested):
            raise ValueError(
                "parent_comment_id, root_parent_comment_id and nesting_level "
                "must all indicate the same top-level state"
            )
        return self

    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None
