"""Moderate comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.common import MessageResponse
from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.service import CommentService, UserService
from inkwell.domain.value import CommentId, CommentStatus, PostId, Role, UserId


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    post_id: str  # UUID string (post the comment is addressed under)
    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be an admin)
    status: CommentStatus


class ModerateCommentUseCase(BaseUseCase):
    """Use case for an administrator setting a comment's status."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ModerateCommentRequest) -> MessageResponse:
        """Execute moderate comment flow.

        Args:
            request: Moderate comment request

        Returns:
            Confirmation message

        Raises:
            NotAuthorizedError: If caller is not an admin
            NotFoundError: If user or comment not found, or the comment
                belongs to another post
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        if user.role != Role.ADMIN:
            raise NotAuthorizedError(
                "moderate", "comment", request.comment_id, request.user_id
            )

        comment = await self.comment_service.get_comment_on_post(
            CommentId(UUID(request.comment_id)), PostId(UUID(request.post_id))
        )
        await self.comment_service.moderate_comment(comment.id, request.status)
        return MessageResponse(message="Comment moderated successfully")
