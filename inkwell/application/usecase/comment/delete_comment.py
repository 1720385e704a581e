"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.comment.common import MessageResponse
from inkwell.domain.service import CommentService, PostService, UserService
from inkwell.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string (post the comment is addressed under)
    comment_id: str  # UUID string
    user_id: str  # Current user ID


class DeleteCommentUseCase:
    """Use case for soft deleting a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Execute delete comment flow.

        Steps:
        1. Load the caller to learn their role
        2. Load the comment and check it belongs to the addressed post
        3. Load the comment's post to learn its author
        4. Hide the comment via the service (which checks permissions)

        Args:
            request: Delete comment request

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If user, comment or post not found
            NotAuthorizedError: If caller may not delete the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        post_id = PostId(UUID(request.post_id))
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        comment = await self.comment_service.get_comment_on_post(comment_id, post_id)

        post = await self.post_service.get_post_by_id(comment.post_id)

        await self.comment_service.delete_comment(
            comment_id=comment_id,
            requesting_user_id=user.id,
            requesting_user_role=user.role,
            post_author_id=post.author_id if post else None,
        )
        return MessageResponse(message="Comment deleted successfully")
