"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cinema.domain.model import Comment
from cinema.domain.repository import CommentRepository
from cinema.domain.value import CommentId, MovieId
from cinema.persistence.mappers import comment_to_dict, row_to_comment
from cinema.persistence.tables import comments_table

# created_at ties fall back to insertion order
NEWEST_FIRST = (desc(comments_table.c.created_at), desc(comments_table.c.seq))


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _replies_filter(self, parent_comment_id: CommentId, include_nested: bool):
        direct = comments_table.c.parent_comment_id == parent_comment_id
        if not include_nested:
            return direct
        return or_(
            direct,
            and_(
                comments_table.c.root_parent_comment_id == parent_comment_id,
                comments_table.c.id != parent_comment_id,
            ),
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace content and stamp the edit time."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, edited_at=edited_at, updated_at=edited_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def adjust_reply_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to reply_count, never going below 0."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                reply_count=func.greatest(comments_table.c.reply_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_descendant_ids(self, comment_id: CommentId) -> List[CommentId]:
        """Walk the tree with a recursive CTE over parent links.

        The anchor also picks up comments rooted at ``comment_id`` so replies
        redirected onto a root are found in the same pass.
        """
        descendants = (
            select(comments_table.c.id)
            .where(
                or_(
                    comments_table.c.parent_comment_id == comment_id,
                    comments_table.c.root_parent_comment_id == comment_id,
                )
            )
            .cte("descendants", recursive=True)
        )
        child = comments_table.alias("child")
        descendants = descendants.union(
            select(child.c.id).where(child.c.parent_comment_id == descendants.c.id)
        )

        stmt = select(descendants.c.id).where(descendants.c.id != comment_id)
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]

    async def delete_many(self, comment_ids: List[CommentId]) -> int:
        """Delete comments in one statement."""
        if not comment_ids:
            return 0
        stmt = delete(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def find_top_level(
        self, movie_id: MovieId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find top-level comments for a movie, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.movie_id == movie_id)
            .where(comments_table.c.parent_comment_id.is_(None))
            .order_by(*NEWEST_FIRST)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, movie_id: MovieId) -> int:
        """Count top-level comments for a movie."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.movie_id == movie_id)
            .where(comments_table.c.parent_comment_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(
        self,
        parent_comment_id: CommentId,
        include_nested: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find replies, shallowest level first, then newest first."""
        stmt = (
            select(comments_table)
            .where(self._replies_filter(parent_comment_id, include_nested))
            .order_by(
                comments_table.c.nesting_level,
                *NEWEST_FIRST,
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(
        self, parent_comment_id: CommentId, include_nested: bool = False
    ) -> int:
        """Count replies matching the find_replies filter."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._replies_filter(parent_comment_id, include_nested))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_direct_replies(self, comment_id: CommentId) -> int:
        """Count comments whose parent is comment_id."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_root_descendants(self, comment_id: CommentId) -> int:
        """Count comments rooted at comment_id that are not its direct replies."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.root_parent_comment_id == comment_id)
            .where(comments_table.c.parent_comment_id != comment_id)
            .where(comments_table.c.id != comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_all(self) -> int:
        """Count all comments."""
        stmt = select(func.count()).select_from(comments_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_created_between(self, start: datetime, end: datetime) -> int:
        """Count comments created in [start, end)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.created_at >= start)
            .where(comments_table.c.created_at < end)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_recent_top_level(self, limit: int = 10) -> List[Comment]:
        """Find the most recent top-level comments across all movies."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.is_(None))
            .order_by(*NEWEST_FIRST)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_ids(self, limit: int = 500, offset: int = 0) -> List[CommentId]:
        """Page through all comment IDs in insertion order."""
        stmt = (
            select(comments_table.c.id)
            .order_by(comments_table.c.seq)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]
