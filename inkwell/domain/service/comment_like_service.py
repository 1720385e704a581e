"""Comment like domain service."""

from dataclasses import dataclass
from datetime import datetime

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import CommentLike
from inkwell.domain.repository import CommentLikeRepository
from inkwell.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService


@dataclass(frozen=True)
class LikeToggleResult:
    """Outcome of a like toggle."""

    liked: bool
    likes_count: int


class CommentLikeService(Service):
    """Domain service for liking and unliking comments."""

    def __init__(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize comment like service.

        Args:
            comment_like_repository: Comment like repository
            comment_service: Comment domain service
        """
        self.comment_like_repository = comment_like_repository
        self.comment_service = comment_service

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> LikeToggleResult:
        """Like a comment, or remove the like if the user already liked it.

        The like row and the counter change share the request's transaction,
        and the counter is changed with an SQL-level increment/decrement.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            Whether the comment is now liked and its new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_like_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            removed = await self.comment_like_repository.remove(comment_id, user_id)
            if removed:
                likes_count = await self.comment_service.decrement_likes(comment_id)
                logfire.info(
                    "Comment unliked",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                    likes_count=likes_count,
                )
                return LikeToggleResult(liked=False, likes_count=likes_count)

            added = await self.comment_like_repository.add(
                CommentLike(
                    comment_id=comment_id, user_id=user_id, created_at=datetime.now()
                )
            )
            if not added:
                # A concurrent request from the same user inserted it first
                logfire.warn(
                    "Duplicate like ignored",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                current = await self.comment_service.get_comment_by_id(comment_id)
                return LikeToggleResult(
                    liked=True,
                    likes_count=current.likes_count if current else comment.likes_count,
                )

            likes_count = await self.comment_service.increment_likes(comment_id)
            logfire.info(
                "Comment liked",
                comment_id=str(comment_id),
                user_id=str(user_id),
                likes_count=likes_count,
            )
            return LikeToggleResult(liked=True, likes_count=likes_count)
