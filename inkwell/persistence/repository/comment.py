"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, CommentStatus, PostId
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status == status.value)
            # id breaks ties so pages stay stable for equal timestamps
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> int:
        """Count top-level comments of a post with the given status."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> List[Comment]:
        """Find every reply on a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_not(None))
            .where(comments_table.c.status == status.value)
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

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

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's status."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment likes_count by 1."""
        return await self._adjust_likes(comment_id, 1)

    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically decrement likes_count by 1."""
        return await self._adjust_likes(comment_id, -1)

    async def _adjust_likes(self, comment_id: CommentId, delta: int) -> Optional[int]:
        # Evaluated by the database so concurrent toggles never lose an update
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes_count=comments_table.c.likes_count + delta)
            .returning(comments_table.c.likes_count)
        )
        result = await self.session.execute(stmt)
        likes_count = result.scalar_one_or_none()
        await self.session.flush()
        return likes_count
