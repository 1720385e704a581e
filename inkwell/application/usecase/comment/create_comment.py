"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.comment.common import CommentNodeResponse
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    body: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentNodeResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment in the same shape as listed comments

        Raises:
            NotFoundError: If post or parent comment not found
            InvalidStateError: If post unpublished or parent on another post
            ValueError: If an ID is malformed
        """
        node = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            body=request.body,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )
        return CommentNodeResponse.from_domain(node)
