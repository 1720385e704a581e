"""In-memory comment like repository for testing."""

from typing import Sequence

from inkwell.domain.model.comment_like import CommentLike
from inkwell.domain.repository.comment_like import CommentLikeRepository
from inkwell.domain.value import CommentId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: dict[tuple[CommentId, UserId], CommentLike] = {}

    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        return (comment_id, user_id) in self._likes

    async def add(self, like: CommentLike) -> bool:
        """Insert a like unless the pair already exists."""
        key = (like.comment_id, like.user_id)
        if key in self._likes:
            return False
        self._likes[key] = like
        return True

    async def remove(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Delete a user's like on a comment."""
        return self._likes.pop((comment_id, user_id), None) is not None

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return which of the given comments the user has liked."""
        return {cid for cid in comment_ids if (cid, user_id) in self._likes}

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(1 for cid, _ in self._likes if cid == comment_id)
