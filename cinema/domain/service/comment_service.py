"""Comment domain service.

Owns the comment tree rules: bounded nesting, overflow redirection to the
root, reply counters and cascading deletes.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from cinema.domain.error import NotAuthorizedError, NotFoundError
from cinema.domain.model.comment import MAX_NESTING_LEVEL, Comment
from cinema.domain.repository import CommentRepository
from cinema.domain.value import CommentId, MovieId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        movie_id: MovieId,
        user_id: UserId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        A reply to a comment already at MAX_NESTING_LEVEL is attached to the
        root of the thread instead, keeping level MAX_NESTING_LEVEL.

        Args:
            movie_id: Movie ID
            user_id: Author user ID
            content: Sanitized comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent does not exist in this movie
        """
        with logfire.span(
            "comment_service.create_comment",
            movie_id=str(movie_id),
            user_id=str(user_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            effective_parent_id: CommentId | None = None
            root_id: CommentId | None = None
            nesting_level = 0

            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent or parent.movie_id != movie_id:
                    logfire.warn(
                        "Parent comment not found for movie",
                        parent_comment_id=str(parent_comment_id),
                        movie_id=str(movie_id),
                    )
                    raise NotFoundError("Comment", str(parent_comment_id))

                nesting_level = min(parent.nesting_level + 1, MAX_NESTING_LEVEL)
                root_id = parent.root_parent_comment_id or parent.id
                effective_parent_id = parent.id

                if (
                    nesting_level == MAX_NESTING_LEVEL
                    and parent.nesting_level == MAX_NESTING_LEVEL
                ):
                    effective_parent_id = root_id
                    logfire.info(
                        "Reply redirected to thread root",
                        requested_parent_id=str(parent.id),
                        root_id=str(root_id),
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                movie_id=movie_id,
                user_id=user_id,
                content=content,
                parent_comment_id=effective_parent_id,
                root_parent_comment_id=root_id,
                nesting_level=nesting_level,
                reply_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            if effective_parent_id:
                await self.comment_repository.adjust_reply_count(
                    effective_parent_id, 1
                )
                if root_id != effective_parent_id:
                    await self.comment_repository.adjust_reply_count(root_id, 1)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                movie_id=str(movie_id),
                nesting_level=nesting_level,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def _get_owned(self, comment_id: CommentId, user_id: UserId) -> Comment:
        comment = await self.get_comment_by_id(comment_id)
        if comment.user_id != user_id:
            logfire.warn(
                "User does not own comment",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("Comment", str(comment_id), str(user_id))
        return comment

    async def update_content(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: Acting user ID
            content: Sanitized replacement text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            user_id=str(user_id),
            content_length=len(content),
        ):
            await self._get_owned(comment_id, user_id)

            updated = await self.comment_repository.update_content(
                comment_id, content, datetime.now()
            )
            if not updated:
                # Removed between the ownership check and the write
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment owned by the user together with all its descendants.

        Args:
            comment_id: Comment ID
            user_id: Acting user ID

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self._get_owned(comment_id, user_id)

            descendant_ids = await self.comment_repository.find_descendant_ids(
                comment_id
            )
            removed = await self.comment_repository.delete_many(
                [*descendant_ids, comment_id]
            )

            parent_id = comment.parent_comment_id
            root_id = comment.root_parent_comment_id
            subtree_size = len(descendant_ids) + 1

            if parent_id and parent_id == root_id:
                await self.comment_repository.adjust_reply_count(
                    root_id, -subtree_size
                )
            elif parent_id:
                await self.comment_repository.adjust_reply_count(parent_id, -1)
                await self.comment_repository.adjust_reply_count(
                    root_id, -subtree_size
                )

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                descendant_count=len(descendant_ids),
                removed=removed,
            )
            return removed

    async def list_top_level(
        self, movie_id: MovieId, page: int = 1, limit: int = 10
    ) -> tuple[list[Comment], int]:
        """List top-level comments of a movie, newest first.

        Args:
            movie_id: Movie ID
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (page of comments, total top-level comments)
        """
        with logfire.span(
            "comment_service.list_top_level",
            movie_id=str(movie_id),
            page=page,
            limit=limit,
        ):
            offset = (page - 1) * limit
            comments = await self.comment_repository.find_top_level(
                movie_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_top_level(movie_id)
            logfire.info(
                "Top-level comments retrieved",
                movie_id=str(movie_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def list_replies(
        self,
        parent_comment_id: CommentId,
        movie_id: MovieId,
        page: int = 1,
        limit: int = 10,
        include_nested_replies: bool = False,
    ) -> tuple[list[Comment], int]:
        """List replies under a comment.

        With ``include_nested_replies`` and a top-level parent, the whole
        thread is returned flattened, shallowest level first.

        Args:
            parent_comment_id: Parent comment ID
            movie_id: Movie the parent must belong to
            page: 1-based page number
            limit: Page size
            include_nested_replies: Flatten the thread under a root

        Returns:
            Tuple of (page of replies, total matching replies)

        Raises:
            NotFoundError: If the parent does not exist in this movie
        """
        with logfire.span(
            "comment_service.list_replies",
            parent_comment_id=str(parent_comment_id),
            movie_id=str(movie_id),
            include_nested_replies=include_nested_replies,
        ):
            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if not parent or parent.movie_id != movie_id:
                logfire.warn(
                    "Parent comment not found for movie",
                    parent_comment_id=str(parent_comment_id),
                    movie_id=str(movie_id),
                )
                raise NotFoundError("Comment", str(parent_comment_id))

            offset = (page - 1) * limit
            replies = await self.comment_repository.find_replies(
                parent_comment_id,
                include_nested=include_nested_replies,
                limit=limit,
                offset=offset,
            )
            total = await self.comment_repository.count_replies(
                parent_comment_id, include_nested=include_nested_replies
            )
            return replies, total

    async def count_all(self) -> int:
        """Count every comment."""
        return await self.comment_repository.count_all()

    async def count_by_date_range(self, start: datetime, end: datetime) -> int:
        """Count comments created in the half-open range ``[start, end)``."""
        with logfire.span(
            "comment_service.count_by_date_range",
            start=start.isoformat(),
            end=end.isoformat(),
        ):
            return await self.comment_repository.count_created_between(start, end)

    async def recent_top_level(self, limit: int = 10) -> list[Comment]:
        """Most recent top-level comments across all movies."""
        return await self.comment_repository.find_recent_top_level(limit)

    async def reconcile_reply_count(self, comment_id: CommentId) -> Comment:
        """Recompute a comment's reply count from the stored tree.

        Repairs drift left behind by writes that bypassed the service.

        Args:
            comment_id: Comment ID

        Returns:
            The comment with its corrected count

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.reconcile_reply_count", comment_id=str(comment_id)
        ):
            comment = await self.get_comment_by_id(comment_id)

            expected = await self.comment_repository.count_direct_replies(comment_id)
            expected += await self.comment_repository.count_root_descendants(
                comment_id
            )

            if expected == comment.reply_count:
                return comment

            logfire.warn(
                "Reply count drift detected",
                comment_id=str(comment_id),
                stored=comment.reply_count,
                expected=expected,
            )
            await self.comment_repository.adjust_reply_count(
                comment_id, expected - comment.reply_count
            )
            return comment.with_changes(reply_count=expected)
