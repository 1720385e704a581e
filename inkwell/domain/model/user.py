"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import Role, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Every user can comment and like; the role decides what else they may do.
    """

    id: UserId
    name: str = Field(min_length=2, max_length=100)
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Role = Role.AUTHOR
    created_at: datetime = Field(default_factory=datetime.now)
