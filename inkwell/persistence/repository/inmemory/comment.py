"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, CommentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments of a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None and c.status == status
        ]
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> int:
        """Count top-level comments of a post with the given status."""
        return sum(
            1
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None and c.status == status
        )

    async def find_replies_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.VISIBLE,
    ) -> list[Comment]:
        """Find every reply on a post, oldest first."""
        replies = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is not None and c.status == status
        ]
        replies.sort(key=lambda c: (c.created_at, c.id))
        return replies

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's status."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"status": status, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def increment_likes(self, comment_id: CommentId) -> Optional[int]:
        """Increment likes_count by 1."""
        return self._adjust_likes(comment_id, 1)

    async def decrement_likes(self, comment_id: CommentId) -> Optional[int]:
        """Decrement likes_count by 1."""
        return self._adjust_likes(comment_id, -1)

    def _adjust_likes(self, comment_id: CommentId, delta: int) -> Optional[int]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        # Comments are immutable
        updated = comment.model_copy(
            update={"likes_count": comment.likes_count + delta}
        )
        self._comments[comment_id] = updated
        return updated.likes_count
