"""Unit tests for CommentService."""

from datetime import datetime
from math import ceil
from uuid import uuid4

import pytest

from inkwell.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from inkwell.domain.model import CommentLike
from inkwell.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PostRepository,
    UserRepository,
)
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, CommentStatus, PostId, PostStatus, Role
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed_post(unit_env, status: PostStatus = PostStatus.PUBLISHED):
    """Save an author and a post, returning both."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)

    author = await user_repo.save(make_user("post_author"))
    post = await post_repo.save(make_post(author.id, status=status))
    return author, post


class TestListCommentTrees:
    """Tests for list_comment_trees method."""

    @pytest.mark.asyncio
    async def test_top_level_newest_first_replies_oldest_first(self, unit_env):
        """Roots are ordered newest first, replies oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        older_root = await comment_repo.save(
            make_comment(post.id, author.id, body="older", minutes_ago=10)
        )
        newer_root = await comment_repo.save(
            make_comment(post.id, author.id, body="newer", minutes_ago=5)
        )
        first_reply = await comment_repo.save(
            make_comment(
                post.id, author.id, body="r1", parent_id=older_root.id, minutes_ago=4
            )
        )
        second_reply = await comment_repo.save(
            make_comment(
                post.id, author.id, body="r2", parent_id=older_root.id, minutes_ago=3
            )
        )

        # Act
        page = await comment_service.list_comment_trees(post.id)

        # Assert
        assert [n.comment.id for n in page.nodes] == [newer_root.id, older_root.id]
        assert [r.comment.id for r in page.nodes[1].replies] == [
            first_reply.id,
            second_reply.id,
        ]
        assert page.nodes[0].replies == []
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_hidden_comment_hides_its_whole_subtree(self, unit_env):
        """A -> B(hidden) -> C: only A is returned, C is unreachable."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        a = await comment_repo.save(make_comment(post.id, author.id, minutes_ago=3))
        b = await comment_repo.save(
            make_comment(
                post.id,
                author.id,
                parent_id=a.id,
                status=CommentStatus.HIDDEN,
                minutes_ago=2,
            )
        )
        await comment_repo.save(
            make_comment(post.id, author.id, parent_id=b.id, minutes_ago=1)
        )

        # Act
        page = await comment_service.list_comment_trees(post.id)

        # Assert
        assert len(page.nodes) == 1
        assert page.nodes[0].comment.id == a.id
        assert page.nodes[0].replies == []

    @pytest.mark.asyncio
    async def test_hidden_root_not_counted(self, unit_env):
        """Hidden top-level comments are excluded from data and total."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        await comment_repo.save(make_comment(post.id, author.id))
        await comment_repo.save(
            make_comment(post.id, author.id, status=CommentStatus.HIDDEN)
        )

        # Act
        page = await comment_service.list_comment_trees(post.id)

        # Assert
        assert page.total == 1
        assert len(page.nodes) == 1

    @pytest.mark.asyncio
    async def test_deep_nesting_without_max_depth(self, unit_env):
        """Without a cap, replies are attached at every level."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        parent = await comment_repo.save(
            make_comment(post.id, author.id, minutes_ago=30)
        )
        for depth in range(1, 8):
            parent = await comment_repo.save(
                make_comment(
                    post.id, author.id, parent_id=parent.id, minutes_ago=30 - depth
                )
            )

        # Act
        page = await comment_service.list_comment_trees(post.id)

        # Assert
        depth = 0
        node = page.nodes[0]
        while node.replies:
            node = node.replies[0]
            depth += 1
        assert depth == 7
        assert node.comment.id == parent.id

    @pytest.mark.asyncio
    async def test_max_depth_leaves_out_deeper_replies(self, unit_env):
        """Replies below max_depth levels are not attached or annotated."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        author, post = await _seed_post(unit_env)

        chain = [
            await comment_repo.save(make_comment(post.id, author.id, minutes_ago=2000))
        ]
        for level in range(1, 1200):
            chain.append(
                await comment_repo.save(
                    make_comment(
                        post.id,
                        author.id,
                        parent_id=chain[-1].id,
                        minutes_ago=2000 - level,
                    )
                )
            )
        await like_repo.add(CommentLike(comment_id=chain[3].id, user_id=author.id))
        await like_repo.add(CommentLike(comment_id=chain[4].id, user_id=author.id))

        # Act
        capped = await comment_service.list_comment_trees(
            post.id, viewer_id=author.id, max_depth=3
        )
        uncapped = await comment_service.list_comment_trees(post.id)

        # Assert
        node = capped.nodes[0]
        levels = [node]
        while node.replies:
            [node] = node.replies
            levels.append(node)
        assert [n.comment.id for n in levels] == [c.id for c in chain[:4]]
        assert levels[-1].is_liked is True
        assert levels[-1].parent_author == author

        depth = 0
        node = uncapped.nodes[0]
        while node.replies:
            [node] = node.replies
            depth += 1
        assert depth == len(chain) - 1

    @pytest.mark.asyncio
    async def test_pagination_and_total_pages(self, unit_env):
        """Offset pagination over roots with total computed from the same filter."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        for i in range(5):
            await comment_repo.save(
                make_comment(post.id, author.id, body=f"c{i}", minutes_ago=10 - i)
            )

        # Act
        page_two = await comment_service.list_comment_trees(post.id, page=2, limit=2)
        page_three = await comment_service.list_comment_trees(post.id, page=3, limit=2)

        # Assert - newest first: c4, c3 | c2, c1 | c0
        assert [n.comment.body for n in page_two.nodes] == ["c2", "c1"]
        assert [n.comment.body for n in page_three.nodes] == ["c0"]
        assert page_two.total == 5
        assert page_two.total_pages == ceil(5 / 2)

    @pytest.mark.asyncio
    async def test_is_liked_reflects_viewer(self, unit_env):
        """is_liked is true only for comments the viewer liked."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _seed_post(unit_env)
        viewer = await user_repo.save(make_user("viewer"))

        liked = await comment_repo.save(
            make_comment(post.id, author.id, likes_count=1, minutes_ago=2)
        )
        await comment_repo.save(
            make_comment(post.id, author.id, parent_id=liked.id, minutes_ago=1)
        )
        await like_repo.add(CommentLike(comment_id=liked.id, user_id=viewer.id))

        # Act
        as_viewer = await comment_service.list_comment_trees(
            post.id, viewer_id=viewer.id
        )
        anonymous = await comment_service.list_comment_trees(post.id)

        # Assert
        assert as_viewer.nodes[0].is_liked is True
        assert as_viewer.nodes[0].likes_count == 1
        assert as_viewer.nodes[0].replies[0].is_liked is False
        assert anonymous.nodes[0].is_liked is False

    @pytest.mark.asyncio
    async def test_replies_carry_parent_author(self, unit_env):
        """Replies expose the author of the comment they answer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _seed_post(unit_env)
        replier = await user_repo.save(make_user("replier"))

        root = await comment_repo.save(make_comment(post.id, author.id, minutes_ago=2))
        await comment_repo.save(
            make_comment(post.id, replier.id, parent_id=root.id, minutes_ago=1)
        )

        # Act
        page = await comment_service.list_comment_trees(post.id)

        # Assert
        root_node = page.nodes[0]
        assert root_node.author == author
        assert root_node.parent_author is None
        assert root_node.replies[0].author == replier
        assert root_node.replies[0].parent_author == author

    @pytest.mark.asyncio
    async def test_unknown_post_returns_empty_page(self, unit_env):
        """Listing an unknown post is not an error."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        page = await comment_service.list_comment_trees(PostId(uuid4()))

        # Assert
        assert page.nodes == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.asyncio
    async def test_invalid_page_raises_error(self, unit_env):
        """Page and limit must be positive."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValueError):
            await comment_service.list_comment_trees(PostId(uuid4()), page=0)
        with pytest.raises(ValueError):
            await comment_service.list_comment_trees(PostId(uuid4()), limit=0)


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """New comments are visible, unliked and have no replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)

        # Act
        node = await comment_service.create_comment(post.id, author.id, "Hello")

        # Assert
        assert node.comment.status == CommentStatus.VISIBLE
        assert node.comment.likes_count == 0
        assert node.comment.parent_id is None
        assert node.is_liked is False
        assert node.replies == []
        assert node.author == author
        assert await comment_repo.find_by_id(node.comment.id) is not None

    @pytest.mark.asyncio
    async def test_create_reply_attaches_parent_author(self, unit_env):
        """A reply is returned with the parent comment's author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _seed_post(unit_env)
        replier = await user_repo.save(make_user("replier"))
        parent = await comment_repo.save(make_comment(post.id, author.id))

        # Act
        node = await comment_service.create_comment(
            post.id, replier.id, "Reply", parent_id=parent.id
        )

        # Assert
        assert node.comment.parent_id == parent.id
        assert node.parent_author == author

    @pytest.mark.asyncio
    async def test_create_does_not_load_existing_replies(self, unit_env, monkeypatch):
        """A new comment has no replies, so the post's threads are not fetched."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        parent = await comment_repo.save(make_comment(post.id, author.id))
        await comment_repo.save(make_comment(post.id, author.id, parent_id=parent.id))

        async def fail_find_replies(*args, **kwargs):
            raise AssertionError("replies should not be loaded")

        monkeypatch.setattr(comment_repo, "find_replies_by_post", fail_find_replies)

        # Act
        node = await comment_service.create_comment(
            post.id, author.id, "Another reply", parent_id=parent.id
        )

        # Assert
        assert node.replies == []
        assert node.parent_author == author
        assert node.author == author

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post_raises_error(self, unit_env):
        """Commenting on an unknown post fails with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("writer"))

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_comment(PostId(uuid4()), author.id, "Hi")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [PostStatus.DRAFT, PostStatus.SCHEDULED])
    @pytest.mark.parametrize("role", [Role.ADMIN, Role.EDITOR, Role.AUTHOR])
    async def test_create_comment_on_unpublished_post_raises_error(
        self, unit_env, status, role
    ):
        """Only published posts accept comments, whatever the caller's role."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        owner = await user_repo.save(make_user("owner"))
        caller = await user_repo.save(make_user("caller", role=role))
        scheduled_at = datetime.now() if status == PostStatus.SCHEDULED else None
        post = await post_repo.save(
            make_post(owner.id, status=status, scheduled_at=scheduled_at)
        )

        # Act & Assert
        with pytest.raises(InvalidStateError, match="unpublished"):
            await comment_service.create_comment(post.id, caller.id, "Hi")
        with pytest.raises(InvalidStateError, match="unpublished"):
            await comment_service.create_comment(post.id, owner.id, "Hi")
        assert await comment_repo.count_top_level(post.id) == 0

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises_error(self, unit_env):
        """Replying to an unknown comment fails with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _seed_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Parent comment"):
            await comment_service.create_comment(
                post.id, author.id, "Hi", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post_creates_nothing(self, unit_env):
        """A parent from another post is rejected and no row is written."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        author, post = await _seed_post(unit_env)
        other_post = await post_repo.save(make_post(author.id))
        foreign_parent = await comment_repo.save(make_comment(other_post.id, author.id))

        # Act & Assert
        with pytest.raises(InvalidStateError, match="does not belong"):
            await comment_service.create_comment(
                post.id, author.id, "Hi", parent_id=foreign_parent.id
            )
        assert await comment_repo.find_replies_by_post(post.id) == []
        assert await comment_repo.find_replies_by_post(other_post.id) == []


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_comment_author_can_delete(self, unit_env):
        """Deleting hides the comment but keeps the row."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post.id, author.id))

        # Act
        hidden = await comment_service.delete_comment(
            comment.id, author.id, Role.AUTHOR, post_author_id=None
        )

        # Assert
        assert hidden.status == CommentStatus.HIDDEN
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert stored.status == CommentStatus.HIDDEN

    @pytest.mark.asyncio
    async def test_post_author_can_delete_others_comment(self, unit_env):
        """The post's author may remove comments from their post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_author, post = await _seed_post(unit_env)
        commenter = await user_repo.save(make_user("commenter"))
        comment = await comment_repo.save(make_comment(post.id, commenter.id))

        # Act
        hidden = await comment_service.delete_comment(
            comment.id, post_author.id, Role.AUTHOR, post_author_id=post_author.id
        )

        # Assert
        assert hidden.status == CommentStatus.HIDDEN

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_comment(self, unit_env):
        """Admins may delete comments regardless of authorship."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_author, post = await _seed_post(unit_env)
        admin = await user_repo.save(make_user("admin", role=Role.ADMIN))
        comment = await comment_repo.save(make_comment(post.id, post_author.id))

        # Act
        hidden = await comment_service.delete_comment(
            comment.id, admin.id, Role.ADMIN, post_author_id=post_author.id
        )

        # Assert
        assert hidden.status == CommentStatus.HIDDEN

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Anyone else is rejected and the comment stays visible."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_author, post = await _seed_post(unit_env)
        stranger = await user_repo.save(make_user("stranger", role=Role.EDITOR))
        comment = await comment_repo.save(make_comment(post.id, post_author.id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(
                comment.id, stranger.id, Role.EDITOR, post_author_id=post_author.id
            )
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.VISIBLE

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_error(self, unit_env):
        """Deleting an unknown comment fails with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, _ = await _seed_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(
                CommentId(uuid4()), author.id, Role.ADMIN, post_author_id=None
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_keeps_replies_linked(self, unit_env):
        """Replies of a hidden comment keep their parent_id."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        parent = await comment_repo.save(make_comment(post.id, author.id))
        reply = await comment_repo.save(
            make_comment(post.id, author.id, parent_id=parent.id)
        )

        # Act
        await comment_service.delete_comment(
            parent.id, author.id, Role.AUTHOR, post_author_id=author.id
        )

        # Assert
        stored_reply = await comment_repo.find_by_id(reply.id)
        assert stored_reply.parent_id == parent.id
        assert stored_reply.status == CommentStatus.VISIBLE


class TestModerateComment:
    """Tests for moderate_comment method."""

    @pytest.mark.asyncio
    async def test_moderate_hides_and_restores(self, unit_env):
        """Moderation sets the status directly in either direction."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post.id, author.id))

        # Act
        hidden = await comment_service.moderate_comment(
            comment.id, CommentStatus.HIDDEN
        )
        restored = await comment_service.moderate_comment(
            comment.id, CommentStatus.VISIBLE
        )

        # Assert
        assert hidden.status == CommentStatus.HIDDEN
        assert restored.status == CommentStatus.VISIBLE

    @pytest.mark.asyncio
    async def test_moderate_missing_comment_raises_error(self, unit_env):
        """Moderating an unknown comment fails with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.moderate_comment(
                CommentId(uuid4()), CommentStatus.HIDDEN
            )
