"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, PostStatus


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def publish_scheduled(self, now: datetime) -> int:
        """Publish every scheduled post whose scheduled_at is due."""
        due = [
            p
            for p in self._posts.values()
            if p.status == PostStatus.SCHEDULED
            and p.scheduled_at is not None
            and p.scheduled_at <= now
        ]
        for post in due:
            self._posts[post.id] = post.model_copy(
                update={
                    "status": PostStatus.PUBLISHED,
                    "published_at": now,
                    "scheduled_at": None,
                    "updated_at": now,
                }
            )
        return len(due)
