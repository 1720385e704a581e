"""Publish scheduled posts use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.service import PostService


class PublishScheduledPostsResponse(BaseModel):
    """Publish scheduled posts response."""

    published: int
    ran_at: datetime


class PublishScheduledPostsUseCase:
    """Use case run once a minute to publish posts whose schedule is due."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize publish scheduled posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, now: datetime | None = None) -> PublishScheduledPostsResponse:
        """Publish every due scheduled post.

        Args:
            now: Reference time (defaults to current time)

        Returns:
            Number of posts published and the reference time used
        """
        now = now or datetime.now()
        published = await self.post_service.publish_scheduled_posts(now)
        return PublishScheduledPostsResponse(published=published, ran_at=now)
