"""CommentLike join fact.

At most one like per (comment, user); presence means "liked".
"""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment. Created and deleted, never updated."""

    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
