"""Comment entity.

Comments form a strict tree per post: top-level comments have no parent,
replies point at an existing comment on the same post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, CommentStatus, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - parent_id: Direct parent comment (None for top-level)
    - status: VISIBLE or HIDDEN (soft delete / moderation)
    - likes_count: Denormalized count of CommentLike facts
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=2000)
    parent_id: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.VISIBLE
    # Not clamped: mirrors the counter column exactly
    likes_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_visible(self) -> bool:
        return self.status == CommentStatus.VISIBLE
