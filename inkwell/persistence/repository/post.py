"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, PostStatus
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)
        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def publish_scheduled(self, now: datetime) -> int:
        """Publish every scheduled post whose scheduled_at is due."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.status == PostStatus.SCHEDULED.value)
            .where(posts_table.c.scheduled_at <= now)
            .values(
                status=PostStatus.PUBLISHED.value,
                published_at=now,
                scheduled_at=None,
                updated_at=now,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
