"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root.

    Only the fields the comment subsystem and the publishing sweep need:
    ownership, publication status and its timestamps.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200, pattern=r"^[a-z0-9-]+$")
    author_id: UserId
    status: PostStatus = PostStatus.DRAFT
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_schedule(self) -> "Post":
        """Scheduled posts must say when they go live."""
        if self.status == PostStatus.SCHEDULED and self.scheduled_at is None:
            raise ValueError("scheduled_at is required for scheduled posts")
        return self

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED
