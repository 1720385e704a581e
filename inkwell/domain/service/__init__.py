"""Domain services."""

from .base import Service
from .comment_like_service import CommentLikeService, LikeToggleResult
from .comment_service import CommentService, CommentTreeNode, CommentTreePage
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentLikeService",
    "CommentService",
    "CommentTreeNode",
    "CommentTreePage",
    "JWTService",
    "LikeToggleResult",
    "PostService",
    "Service",
    "UserService",
]
