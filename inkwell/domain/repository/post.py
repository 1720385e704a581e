"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def publish_scheduled(self, now: datetime) -> int:
        """Publish every scheduled post whose scheduled_at is due.

        Sets status to PUBLISHED, published_at to now and clears scheduled_at.

        Args:
            now: Reference time

        Returns:
            Number of posts published
        """
        pass
