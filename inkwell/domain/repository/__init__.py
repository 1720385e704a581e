"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.comment_like import CommentLikeRepository
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "CommentLikeRepository",
]
