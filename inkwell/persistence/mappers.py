"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import Comment, CommentLike, Post, User
from inkwell.domain.value import (
    CommentId,
    CommentStatus,
    PostId,
    PostStatus,
    Role,
    UserId,
    Username,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=row["name"],
        username=Username(row["username"]),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        role=Role(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "name": user.name,
        "username": user.username.root,
        "email": user.email,
        "avatar_url": user.avatar_url,
        "role": user.role.value,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        slug=row["slug"],
        author_id=UserId(_as_uuid(row["author_id"])),
        status=PostStatus(row["status"]),
        scheduled_at=row.get("scheduled_at"),
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "author_id": post.author_id,
        "status": post.status.value,
        "scheduled_at": post.scheduled_at,
        "published_at": post.published_at,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(_as_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        status=CommentStatus(row["status"]),
        likes_count=row["likes_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "body": comment.body,
        "status": comment.status.value,
        "likes_count": comment.likes_count,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        comment_id=CommentId(_as_uuid(row["comment_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()
