"""Post domain service."""

from datetime import datetime

import logfire

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations used by comments and publishing."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def publish_scheduled_posts(self, now: datetime | None = None) -> int:
        """Publish scheduled posts whose time has come.

        Args:
            now: Reference time (defaults to current time)

        Returns:
            Number of posts published
        """
        now = now or datetime.now()
        with logfire.span("post_service.publish_scheduled_posts", now=now.isoformat()):
            count = await self.post_repository.publish_scheduled(now)
            if count:
                logfire.info("Published scheduled posts", count=count)
            return count
