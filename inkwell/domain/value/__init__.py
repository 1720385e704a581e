"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import CommentId, PostId, UserId
from inkwell.domain.value.types import CommentStatus, PostStatus, Role, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Role",
    "PostStatus",
    "CommentStatus",
    "Username",
]
