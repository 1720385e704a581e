"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.common import CamelModel
from inkwell.domain.service import CommentLikeService, CommentService
from inkwell.domain.value import CommentId, PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str  # UUID string (post the comment is addressed under)
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    liked: bool
    likes_count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            comment_service: Comment domain service
            comment_like_service: Comment like domain service
        """
        self.comment_service = comment_service
        self.comment_like_service = comment_like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If comment not found or belongs to another post
        """
        comment = await self.comment_service.get_comment_on_post(
            CommentId(UUID(request.comment_id)), PostId(UUID(request.post_id))
        )
        result = await self.comment_like_service.toggle_like(
            comment.id, UserId(UUID(request.user_id))
        )
        return ToggleLikeResponse(liked=result.liked, likes_count=result.likes_count)
