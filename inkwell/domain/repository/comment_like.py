"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from inkwell.domain.model.comment_like import CommentLike
from inkwell.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike facts.

    A like is keyed by (comment_id, user_id); the store enforces uniqueness.
    """

    @abstractmethod
    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment.

        Args:
            comment_id: The comment ID
            user_id: The user ID

        Returns:
            True if the like exists
        """
        pass

    @abstractmethod
    async def add(self, like: CommentLike) -> bool:
        """Insert a like unless one already exists for the pair.

        Args:
            like: The like to insert

        Returns:
            True if a row was inserted, False if the pair already existed
        """
        pass

    @abstractmethod
    async def remove(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Delete a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return which of the given comments the user has liked (batch query).

        Args:
            user_id: The user ID
            comment_ids: Comments to check

        Returns:
            Subset of comment_ids liked by the user
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Number of like facts for the comment
        """
        pass
