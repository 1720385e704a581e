"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from inkwell.domain.model import Comment, Post, User
from inkwell.domain.value import (
    CommentId,
    CommentStatus,
    PostId,
    PostStatus,
    Role,
    UserId,
    Username,
)

# Keep spans local and quiet while testing
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str = "reader",
    role: Role = Role.AUTHOR,
    name: str | None = None,
) -> User:
    """Helper function to build a test user."""
    return User(
        id=UserId(uuid4()),
        name=name or username.title(),
        username=Username(username),
        email=f"{username}@example.com",
        avatar_url=None,
        role=role,
        created_at=datetime.now(),
    )


def make_post(
    author_id: UserId,
    status: PostStatus = PostStatus.PUBLISHED,
    scheduled_at: datetime | None = None,
    slug: str | None = None,
) -> Post:
    """Helper function to build a test post."""
    post_id = PostId(uuid4())
    now = datetime.now()
    return Post(
        id=post_id,
        title="Test Post",
        slug=slug or f"test-post-{str(post_id)[:8]}",
        author_id=author_id,
        status=status,
        scheduled_at=scheduled_at,
        published_at=now if status == PostStatus.PUBLISHED else None,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    author_id: UserId,
    body: str = "Test comment",
    parent_id: CommentId | None = None,
    status: CommentStatus = CommentStatus.VISIBLE,
    likes_count: int = 0,
    minutes_ago: int = 0,
) -> Comment:
    """Helper function to build a test comment.

    minutes_ago shifts created_at into the past so ordering is deterministic.
    """
    created_at = datetime.now() - timedelta(minutes=minutes_ago)
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        body=body,
        parent_id=parent_id,
        status=status,
        likes_count=likes_count,
        created_at=created_at,
        updated_at=created_at,
    )
