"""Response models and helpers shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from cinema.config import CommentSettings
from cinema.domain.error import ValidationError
from cinema.domain.model import Comment
from cinema.domain.model.comment import MAX_CONTENT_LENGTH
from cinema.domain.service import ContentSanitizer
from cinema.domain.value import CommentAuthor


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    movie_id: str
    user_id: str
    content: str
    parent_comment_id: str | None
    root_parent_comment_id: str | None
    nesting_level: int
    reply_count: int
    edited_at: datetime | None
    created_at: datetime
    updated_at: datetime
    author: CommentAuthor | None

    @classmethod
    def from_comment(
        cls, comment: Comment, author: CommentAuthor | None = None
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            movie_id=str(comment.movie_id),
            user_id=str(comment.user_id),
            content=comment.content,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            root_parent_comment_id=(
                str(comment.root_parent_comment_id)
                if comment.root_parent_comment_id
                else None
            ),
            nesting_level=comment.nesting_level,
            reply_count=comment.reply_count,
            edited_at=comment.edited_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=author,
        )


class CommentPage(BaseModel):
    """One page of comments."""

    data: list[CommentItem]
    total: int
    count: int
    has_more: bool
    current_page: int

    @classmethod
    def build(
        cls, items: list[CommentItem], total: int, page: int, limit: int
    ) -> "CommentPage":
        return cls(
            data=items,
            total=total,
            count=len(items),
            has_more=total > page * limit,
            current_page=page,
        )


def resolve_limit(limit: int | None, settings: CommentSettings) -> int:
    """Apply the default page size and enforce the maximum.

    Raises:
        ValidationError: If limit exceeds the configured maximum
    """
    if limit is None:
        return settings.default_page_size
    if limit > settings.max_page_size:
        raise ValidationError(
            f"limit must be at most {settings.max_page_size}, got {limit}"
        )
    return limit


def clean_content(sanitizer: ContentSanitizer, raw: str) -> str:
    """Strip markup and check the result is storable.

    Raises:
        ValidationError: If nothing is left or the text is too long
    """
    content = sanitizer.strip_html(raw)
    if not content:
        raise ValidationError("Comment content cannot be empty")
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Comment content cannot exceed {MAX_CONTENT_LENGTH} characters"
        )
    return content
