"""Integration tests for a comment thread's lifecycle.

These tests drive the comment use cases together through one container,
the way a sequence of API requests would.
"""

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.service import JWTService
from inkwell.domain.value import CommentStatus, Role
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


class TestCommentThreadIntegration:
    """Create, like, delete and moderate comments in one thread."""

    @pytest.mark.asyncio
    async def test_thread_lifecycle(self, integration_env):
        """Replies, likes and hiding are all reflected in the listing."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        jwt_service = await integration_env.get(JWTService)
        create = await integration_env.get(CreateCommentUseCase)
        toggle = await integration_env.get(ToggleLikeUseCase)
        delete = await integration_env.get(DeleteCommentUseCase)
        list_comments = await integration_env.get(ListCommentsUseCase)

        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        post = await post_repo.save(make_post(alice.id))
        bob_token = jwt_service.create_token(str(bob.id), "bob")

        # Act
        root = await create.execute(
            CreateCommentRequest(post_id=str(post.id), body="Root", author_id=str(alice.id))
        )
        reply = await create.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                body="Reply",
                author_id=str(bob.id),
                parent_id=root.id,
            )
        )
        nested = await create.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                body="Nested",
                author_id=str(alice.id),
                parent_id=reply.id,
            )
        )
        like = await toggle.execute(
            ToggleLikeRequest(
                post_id=str(post.id), comment_id=root.id, user_id=str(bob.id)
            )
        )
        before = await list_comments.execute(
            ListCommentsRequest(post_id=str(post.id), auth_token=bob_token)
        )

        await delete.execute(
            DeleteCommentRequest(
                post_id=str(post.id), comment_id=reply.id, user_id=str(bob.id)
            )
        )
        after = await list_comments.execute(
            ListCommentsRequest(post_id=str(post.id), auth_token=bob_token)
        )

        # Assert
        assert like.liked is True
        assert like.likes_count == 1

        [listed_root] = before.data
        assert listed_root.is_liked is True
        assert listed_root.likes_count == 1
        assert listed_root.replies[0].id == reply.id
        assert listed_root.replies[0].parent.user.username == "alice"
        assert listed_root.replies[0].replies[0].id == nested.id
        assert listed_root.replies[0].replies[0].parent.user.username == "bob"

        [root_after] = after.data
        assert root_after.id == root.id
        assert root_after.replies == []

    @pytest.mark.asyncio
    async def test_moderation_restores_hidden_subtree(self, integration_env):
        """Restoring a hidden comment brings its untouched replies back."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        create = await integration_env.get(CreateCommentUseCase)
        moderate = await integration_env.get(ModerateCommentUseCase)
        list_comments = await integration_env.get(ListCommentsUseCase)

        admin = await user_repo.save(make_user("admin", role=Role.ADMIN))
        author = await user_repo.save(make_user("author"))
        post = await post_repo.save(make_post(author.id))

        root = await create.execute(
            CreateCommentRequest(post_id=str(post.id), body="Root", author_id=str(author.id))
        )
        await create.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                body="Reply",
                author_id=str(author.id),
                parent_id=root.id,
            )
        )

        # Act
        await moderate.execute(
            ModerateCommentRequest(
                post_id=str(post.id),
                comment_id=root.id,
                user_id=str(admin.id),
                status=CommentStatus.HIDDEN,
            )
        )
        hidden = await list_comments.execute(ListCommentsRequest(post_id=str(post.id)))
        await moderate.execute(
            ModerateCommentRequest(
                post_id=str(post.id),
                comment_id=root.id,
                user_id=str(admin.id),
                status=CommentStatus.VISIBLE,
            )
        )
        restored = await list_comments.execute(ListCommentsRequest(post_id=str(post.id)))

        # Assert
        assert hidden.data == []
        assert hidden.meta.total == 0
        assert len(restored.data) == 1
        assert [r.body for r in restored.data[0].replies] == ["Reply"]
