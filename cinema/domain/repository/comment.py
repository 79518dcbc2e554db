"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from cinema.domain.model.comment import Comment
from cinema.domain.value import CommentId, MovieId


class CommentRepository(ABC):
    """Repository for Comment entity.

    All comments live in one flat collection. Reply listings and cascading
    deletes rely on lookups by ``parent_comment_id`` and
    ``root_parent_comment_id``, so implementations must index both.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace a comment's content and stamp the edit time.

        Args:
            comment_id: The comment ID
            content: Sanitized content
            edited_at: Edit timestamp

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to a comment's reply count.

        The count never drops below zero. Adjusting a comment that no longer
        exists is a no-op.

        Args:
            comment_id: The comment ID
            delta: Positive or negative change
        """
        pass

    @abstractmethod
    async def find_descendant_ids(self, comment_id: CommentId) -> List[CommentId]:
        """Find every comment below a comment.

        Includes comments transitively reachable through parent links and,
        for top-level comments, every comment whose root is this comment
        (which covers replies redirected onto the root).

        Args:
            comment_id: The comment ID

        Returns:
            IDs of all descendants, excluding the comment itself
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: List[CommentId]) -> int:
        """Delete comments in one batch.

        Args:
            comment_ids: IDs to delete

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, movie_id: MovieId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find top-level comments for a movie, newest first.

        Ties on ``created_at`` are ordered by ID, descending.

        Args:
            movie_id: The movie ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, movie_id: MovieId) -> int:
        """Count top-level comments for a movie."""
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_comment_id: CommentId,
        include_nested: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find replies under a comment.

        Direct mode returns comments whose parent is ``parent_comment_id``.
        Nested mode also returns every comment whose root is
        ``parent_comment_id``, flattening the whole thread.

        Ordered by nesting level ascending, then newest first.

        Args:
            parent_comment_id: The parent comment ID
            include_nested: Whether to flatten the thread under a root
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of replies
        """
        pass

    @abstractmethod
    async def count_replies(
        self, parent_comment_id: CommentId, include_nested: bool = False
    ) -> int:
        """Count replies matching the same filter as ``find_replies``."""
        pass

    @abstractmethod
    async def count_direct_replies(self, comment_id: CommentId) -> int:
        """Count comments whose parent is ``comment_id``."""
        pass

    @abstractmethod
    async def count_root_descendants(self, comment_id: CommentId) -> int:
        """Count comments rooted at ``comment_id`` that are not its direct replies."""
        pass

    @abstractmethod
    async def count_all(self) -> int:
        """Count all comments."""
        pass

    @abstractmethod
    async def count_created_between(self, start: datetime, end: datetime) -> int:
        """Count comments created in ``[start, end)``."""
        pass

    @abstractmethod
    async def find_recent_top_level(self, limit: int = 10) -> List[Comment]:
        """Find the most recent top-level comments across all movies."""
        pass

    @abstractmethod
    async def find_ids(self, limit: int = 500, offset: int = 0) -> List[CommentId]:
        """Page through all comment IDs in insertion order."""
        pass
