"""Post use cases."""

from .publish_scheduled import (
    PublishScheduledPostsResponse,
    PublishScheduledPostsUseCase,
)

__all__ = [
    "PublishScheduledPostsResponse",
    "PublishScheduledPostsUseCase",
]
