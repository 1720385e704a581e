"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.comment.common import CamelModel, CommentNodeResponse
from inkwell.config import CommentSettings
from inkwell.domain.service import CommentService, JWTService
from inkwell.domain.value import PostId, UserId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str  # UUID string
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    auth_token: str | None = None  # JWT token for like state (optional)


class PageMeta(CamelModel):
    """Pagination metadata."""

    total: int
    page: int
    limit: int
    total_pages: int


class ListCommentsResponse(BaseModel):
    """List comments response."""

    data: list[CommentNodeResponse]
    meta: PageMeta


class ListCommentsUseCase:
    """Use case for listing a post's comment threads."""

    def __init__(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for identifying the viewer
            comment_settings: Page size defaults and cap
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        An invalid or expired token is treated as an anonymous viewer.

        Args:
            request: List comments request

        Returns:
            Page of comment threads with pagination metadata

        Raises:
            ValueError: If post ID is malformed or page/limit below 1
        """
        post_id = PostId(UUID(request.post_id))

        limit = request.limit or self.comment_settings.default_page_size
        limit = min(limit, self.comment_settings.max_page_size)

        viewer = self.jwt_service.get_user_id_from_token(request.auth_token)
        viewer_id = UserId(UUID(viewer)) if viewer else None

        page = await self.comment_service.list_comment_trees(
            post_id=post_id,
            page=request.page,
            limit=limit,
            viewer_id=viewer_id,
            max_depth=self.comment_settings.max_reply_depth,
        )

        return ListCommentsResponse(
            data=[CommentNodeResponse.from_domain(node) for node in page.nodes],
            meta=PageMeta(
                total=page.total,
                page=page.page,
                limit=page.limit,
                total_pages=page.total_pages,
            ),
        )
