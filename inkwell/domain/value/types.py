"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject


class Role(str, Enum):
    """User role.

    Admins can moderate any comment; editors and authors write posts.
    """

    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    AUTHOR = "AUTHOR"


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "DRAFT"
    SCHEDULED = "SCHEDULED"
    PUBLISHED = "PUBLISHED"


class CommentStatus(str, Enum):
    """Visibility of a comment.

    Deletion and moderation never remove rows, they flip this status.
    """

    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class Username(RootValueObject[str]):
    """Public username shown next to posts and comments.

    3-50 characters: letters, digits, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[a-zA-Z0-9_-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters: letters, digits, '_' or '-'"
            )
        return v
