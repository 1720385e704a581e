"""PostgreSQL implementation of CommentLike repository."""

from typing import Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import CommentLike
from inkwell.domain.repository import CommentLikeRepository
from inkwell.domain.value import CommentId, UserId
from inkwell.persistence.mappers import comment_like_to_dict
from inkwell.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        stmt = select(comment_likes_table.c.comment_id).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def add(self, like: CommentLike) -> bool:
        """Insert a like, ignoring a duplicate for the same pair."""
        stmt = (
            insert(comment_likes_table)
            .values(**comment_like_to_dict(like))
            .on_conflict_do_nothing(index_elements=["comment_id", "user_id"])
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return which of the given comments the user has liked (batch query)."""
        if not comment_ids:
            return set()

        stmt = select(comment_likes_table.c.comment_id).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(row.comment_id) for row in result.fetchall()}

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
