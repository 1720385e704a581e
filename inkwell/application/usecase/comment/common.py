"""Response models shared by the comment use cases.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from inkwell.domain.model import User
from inkwell.domain.service import CommentTreeNode
from inkwell.domain.value import CommentStatus


class CamelModel(BaseModel):
    """Base for API-facing models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummaryResponse(CamelModel):
    """Public author details attached to a comment."""

    id: str
    name: str
    username: str
    avatar_url: str | None

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            username=user.username.root,
            avatar_url=user.avatar_url,
        )


class ParentRefResponse(CamelModel):
    """Reference to the comment being replied to."""

    user: UserSummaryResponse


class CommentNodeResponse(CamelModel):
    """Comment with viewer like state and nested replies.

    Recursive structure mirroring the domain CommentTreeNode.
    """

    id: str
    body: str
    status: CommentStatus
    parent_id: str | None
    likes_count: int
    is_liked: bool
    created_at: datetime
    user: UserSummaryResponse | None
    parent: ParentRefResponse | None = None
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentTreeNode) -> "CommentNodeResponse":
        """Convert a domain tree node, replies included.

        Args:
            node: Domain comment tree node

        Returns:
            API response model with replies recursively converted
        """
        comment = node.comment
        parent = None
        if comment.parent_id is not None and node.parent_author is not None:
            parent = ParentRefResponse(
                user=UserSummaryResponse.from_domain(node.parent_author)
            )

        return cls(
            id=str(comment.id),
            body=comment.body,
            status=comment.status,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            likes_count=node.likes_count,
            is_liked=node.is_liked,
            created_at=comment.created_at,
            user=UserSummaryResponse.from_domain(node.author) if node.author else None,
            parent=parent,
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
