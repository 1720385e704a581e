"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import Field

from inkwell.application.usecase.comment import (
    CommentNodeResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    MessageResponse,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from inkwell.application.usecase.comment.common import CamelModel
from inkwell.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from inkwell.domain.service import JWTService
from inkwell.domain.value import CommentStatus
from inkwell.interface.api.auth import get_auth_token
from inkwell.interface.api.ratelimit import limiter, rate_limit_settings

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Resolve the caller's user ID or fail with 401."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


@router.get("/{post_id}/comments", response_model=ListCommentsResponse)
@limiter.limit(rate_limit_settings.default)
async def list_comments(
    post_id: str,
    request: Request,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Depends(get_auth_token),
) -> ListCommentsResponse:
    """Get a page of top-level comments with their reply threads.

    Top-level comments are newest first, replies oldest first. If
    authenticated, each comment reports whether the caller liked it.

    Args:
        post_id: Post UUID
        request: Incoming request (rate limit key)
        list_comments_use_case: List comments use case from DI
        page: 1-based page number
        limit: Top-level comments per page (capped by configuration)
        auth_token: JWT token from header or cookie (optional)

    Returns:
        Comment threads with pagination metadata
    """
    try:
        use_case_request = ListCommentsRequest(
            post_id=post_id, page=page, limit=limit, auth_token=auth_token
        )
        return await list_comments_use_case.execute(use_case_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    body: str = Field(min_length=1, max_length=2000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CommentNodeResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(rate_limit_settings.create_comment)
async def create_comment(
    post_id: str,
    request: Request,
    payload: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CommentNodeResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Incoming request (rate limit key)
        payload: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from header or cookie

    Returns:
        Created comment in the same shape as listed comments

    Raises:
        HTTPException: If not authenticated, post/parent missing, or invalid
    """
    user_id = _require_user(jwt_service, auth_token, "comment")

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            body=payload.body,
            author_id=user_id,
            parent_id=payload.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidStateError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{post_id}/comments/{comment_id}", response_model=MessageResponse)
@limiter.limit(rate_limit_settings.default)
async def delete_comment(
    post_id: str,
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> MessageResponse:
    """Soft delete a comment.

    Allowed for admins, the post's author and the comment's author.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Incoming request (rate limit key)
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from header or cookie

    Returns:
        Confirmation message

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = _require_user(jwt_service, auth_token, "delete comments")

    try:
        use_case_request = DeleteCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=user_id
        )
        return await delete_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


class ModerateCommentAPIRequest(CamelModel):
    """API request for moderating a comment."""

    status: CommentStatus


@router.post(
    "/{post_id}/comments/{comment_id}/moderate", response_model=MessageResponse
)
@limiter.limit(rate_limit_settings.default)
async def moderate_comment(
    post_id: str,
    comment_id: str,
    request: Request,
    payload: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> MessageResponse:
    """Set a comment's status. Admins only.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Incoming request (rate limit key)
        payload: New status
        moderate_comment_use_case: Moderate comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from header or cookie

    Returns:
        Confirmation message
    """
    user_id = _require_user(jwt_service, auth_token, "moderate comments")

    try:
        use_case_request = ModerateCommentRequest(
            post_id=post_id,
            comment_id=comment_id,
            user_id=user_id,
            status=payload.status,
        )
        return await moderate_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized moderation attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required to moderate comments",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/{post_id}/comments/{comment_id}/like", response_model=ToggleLikeResponse
)
@limiter.limit(rate_limit_settings.toggle_like)
async def toggle_like(
    post_id: str,
    comment_id: str,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ToggleLikeResponse:
    """Like a comment, or unlike it if already liked.

    Requires authentication.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Incoming request (rate limit key)
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from header or cookie

    Returns:
        New like state and like count
    """
    user_id = _require_user(jwt_service, auth_token, "like comments")

    try:
        use_case_request = ToggleLikeRequest(
            post_id=post_id, comment_id=comment_id, user_id=user_id
        )
        return await toggle_like_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
