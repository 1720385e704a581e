"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, whatever its status.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a post, newest first.

        Args:
            post_id: The post ID
            status: Only return comments with this status
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> int:
        """Count top-level comments of a post with the given status.

        Args:
            post_id: The post ID
            status: Only count comments with this status

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def find_replies_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> List[Comment]:
        """Find every reply (comment with a parent) on a post, oldest first.

        Args:
            post_id: The post ID
            status: Only return replies with this status

        Returns:
            Replies ordered by created_at ascending
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
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's status.

        Args:
            comment_id: The comment ID
            status: New status

        Returns:
            The updated comment, None if it does not exist
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically increment likes_count by 1.

        Args:
            comment_id: The comment ID

        Returns:
            The new likes_count, None if the comment does not exist
        """
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Atomically decrement likes_count by 1 (not clamped at zero).

        Args:
            comment_id: The comment ID

        Returns:
            The new likes_count, None if the comment does not exist
        """
        pass
