"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from cinema.domain.model.comment import Comment
from cinema.domain.repository.comment import CommentRepository
from cinema.domain.value import CommentId, MovieId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        # Insertion sequence, mirrors the identity column in Postgres
        self._seq: dict[CommentId, int] = {}
        self._next_seq = count(1)

    def _newest_first(self, comments: list[Comment]) -> list[Comment]:
        return sorted(
            comments, key=lambda c: (c.created_at, self._seq[c.id]), reverse=True
        )

    def _is_reply(
        self, comment: Comment, parent_comment_id: CommentId, include_nested: bool
    ) -> bool:
        if comment.parent_comment_id == parent_comment_id:
            return True
        return (
            include_nested
            and comment.root_parent_comment_id == parent_comment_id
            and comment.id != parent_comment_id
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        if comment.id not in self._seq:
            self._seq[comment.id] = next(self._next_seq)
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.with_changes(
            content=content, edited_at=edited_at, updated_at=edited_at
        )
        self._comments[comment_id] = updated
        return updated

    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.with_changes(
                reply_count=max(comment.reply_count + delta, 0)
            )

    async def find_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Breadth-first walk over parent links, seeded with root matches."""
        found: set[CommentId] = {
            c.id
            for c in self._comments.values()
            if c.parent_comment_id == comment_id
            or c.root_parent_comment_id == comment_id
        }
        frontier = list(found)
        while frontier:
            current = frontier.pop()
            for c in self._comments.values():
                if c.parent_comment_id == current and c.id not in found:
                    found.add(c.id)
                    frontier.append(c.id)
        found.discard(comment_id)
        return list(found)

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        removed = 0
        for comment_id in set(comment_ids):
            self._seq.pop(comment_id, None)
            if self._comments.pop(comment_id, None) is not None:
                removed += 1
        return removed

    async def find_top_level(
        self, movie_id: MovieId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find top-level comments for a movie, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.movie_id == movie_id and c.parent_comment_id is None
        ]
        return self._newest_first(comments)[offset : offset + limit]

    async def count_top_level(self, movie_id: MovieId) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.movie_id == movie_id and c.parent_comment_id is None
        )

    async def find_replies(
        self,
        parent_comment_id: CommentId,
        include_nested: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find replies, shallowest level first, then newest first."""
        comments = [
            c
            for c in self._comments.values()
            if self._is_reply(c, parent_comment_id, include_nested)
        ]
        # Stable sort keeps newest-first order within a level
        comments = sorted(self._newest_first(comments), key=lambda c: c.nesting_level)
        return comments[offset : offset + limit]

    async def count_replies(
        self, parent_comment_id: CommentId, include_nested: bool = False
    ) -> int:
        return sum(
            1
            for c in self._comments.values()
            if self._is_reply(c, parent_comment_id, include_nested)
        )

    async def count_direct_replies(self, comment_id: CommentId) -> int:
        return sum(
            1 for c in self._comments.values() if c.parent_comment_id == comment_id
        )

    async def count_root_descendants(self, comment_id: CommentId) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.root_parent_comment_id == comment_id
            and c.parent_comment_id != comment_id
            and c.id != comment_id
        )

    async def count_all(self) -> int:
        return len(self._comments)

    async def count_created_between(self, start: datetime, end: datetime) -> int:
        return sum(1 for c in self._comments.values() if start <= c.created_at < end)

    async def find_recent_top_level(self, limit: int = 10) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.parent_comment_id is None]
        return self._newest_first(comments)[:limit]

    async def find_ids(self, limit: int = 500, offset: int = 0) -> list[CommentId]:
        ordered = sorted(self._comments, key=self._seq.__getitem__)
        return ordered[offset : offset + limit]
