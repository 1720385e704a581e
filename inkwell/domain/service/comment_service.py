"""Comment domain service.

Builds the threaded view of a post's comments and applies the rules for
creating, deleting and moderating comments.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from math import ceil
from uuid import uuid4

import logfire

from inkwell.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from inkwell.domain.model import Comment, User
from inkwell.domain.repository import CommentLikeRepository, CommentRepository
from inkwell.domain.value import CommentId, CommentStatus, PostId, Role, UserId

from .base import Service
from .post_service import PostService
from .user_service import UserService


@dataclass
class CommentTreeNode:
    """Node in a comment thread.

    Represents a comment annotated for one viewer, with its visible replies
    nested in creation order.
    """

    comment: Comment
    author: User | None
    parent_author: User | None
    is_liked: bool
    replies: list["CommentTreeNode"] = field(default_factory=list)

    @property
    def likes_count(self) -> int:
        return self.comment.likes_count


@dataclass
class CommentTreePage:
    """One page of top-level comment threads plus pagination metadata."""

    nodes: list[CommentTreeNode]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_like_repository: Comment like repository (viewer like state)
            post_service: Post domain service
            user_service: User domain service (author summaries)
        """
        self.comment_repository = comment_repository
        self.comment_like_repository = comment_like_repository
        self.post_service = post_service
        self.user_service = user_service

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found (any status), None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment_on_post(
        self, comment_id: CommentId, post_id: PostId
    ) -> Comment:
        """Get a comment addressed under a post.

        Args:
            comment_id: Comment ID
            post_id: Post the caller addressed the comment under

        Returns:
            The comment (any status)

        Raises:
            NotFoundError: If the comment does not exist or belongs to
                another post
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_comment_trees(
        self,
        post_id: PostId,
        page: int = 1,
        limit: int = 20,
        viewer_id: UserId | None = None,
        max_depth: int | None = None,
    ) -> CommentTreePage:
        """Get a page of top-level comments with their full reply threads.

        Top-level comments are ordered newest first; replies at every level
        are ordered oldest first. Only VISIBLE comments are returned, and the
        replies of a hidden comment are not reachable.

        Args:
            post_id: Post ID
            page: 1-based page number
            limit: Top-level comments per page
            viewer_id: User whose like state is reported (None for anonymous)
            max_depth: Reply levels to attach below each top-level comment
                (None for no limit)

        Returns:
            Page of comment trees. An unknown post yields an empty page.

        Raises:
            ValueError: If page or limit is below 1
        """
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be positive")

        with logfire.span(
            "comment_service.list_comment_trees",
            post_id=str(post_id),
            page=page,
            limit=limit,
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            roots = await self.comment_repository.find_top_level(
                post_id=post_id,
                status=CommentStatus.VISIBLE,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.comment_repository.count_top_level(
                post_id=post_id, status=CommentStatus.VISIBLE
            )

            nodes = (
                await self._resolve_trees(post_id, roots, viewer_id, max_depth)
                if roots
                else []
            )

            logfire.info(
                "Comment trees retrieved",
                post_id=str(post_id),
                roots=len(nodes),
                total=total,
            )
            return CommentTreePage(nodes=nodes, total=total, page=page, limit=limit)

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> CommentTreeNode:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The new comment, annotated the same way as listed comments

        Raises:
            NotFoundError: If the post or parent comment does not exist
            InvalidStateError: If the post is not published or the parent
                belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))
            if not post.is_published:
                logfire.warn(
                    "Comment on unpublished post rejected",
                    post_id=str(post_id),
                    status=post.status.value,
                )
                raise InvalidStateError("Cannot comment on unpublished post")

            parent: Comment | None = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise InvalidStateError(
                        "Parent comment does not belong to this post"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                body=body,
                parent_id=parent_id,
                status=CommentStatus.VISIBLE,
                likes_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent is not None,
            )

            author_ids = [author_id, parent.author_id] if parent else [author_id]
            authors = await self.user_service.get_users_by_ids(author_ids)
            return CommentTreeNode(
                comment=saved,
                author=authors.get(author_id),
                parent_author=authors.get(parent.author_id) if parent else None,
                is_liked=False,
            )

    async def delete_comment(
        self,
        comment_id: CommentId,
        requesting_user_id: UserId,
        requesting_user_role: Role,
        post_author_id: UserId | None,
    ) -> Comment:
        """Soft delete a comment by hiding it.

        Admins, the author of the comment's post and the comment's own
        author may delete. Replies keep their parent link.

        Args:
            comment_id: Comment ID
            requesting_user_id: Caller's user ID
            requesting_user_role: Caller's role
            post_author_id: Author of the post the comment belongs to

        Returns:
            The hidden comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller may not delete it
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(requesting_user_id),
            role=requesting_user_role.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            can_delete = (
                requesting_user_role == Role.ADMIN
                or post_author_id == requesting_user_id
                or comment.author_id == requesting_user_id
            )
            if not can_delete:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(requesting_user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(requesting_user_id)
                )

            hidden = await self.comment_repository.update_status(
                comment_id, CommentStatus.HIDDEN
            )
            if hidden is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment hidden", comment_id=str(comment_id))
            return hidden

    async def moderate_comment(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Set a comment's status directly.

        Callers must restrict this to administrators.

        Args:
            comment_id: Comment ID
            status: New status

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.moderate_comment",
            comment_id=str(comment_id),
            status=status.value,
        ):
            updated = await self.comment_repository.update_status(comment_id, status)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment moderated", comment_id=str(comment_id), status=status.value
            )
            return updated

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment the like counter and return the new value."""
        likes_count = await self.comment_repository.increment_likes(comment_id)
        if likes_count is None:
            raise NotFoundError("Comment", str(comment_id))
        return likes_count

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement the like counter and return the new value."""
        likes_count = await self.comment_repository.decrement_likes(comment_id)
        if likes_count is None:
            raise NotFoundError("Comment", str(comment_id))
        return likes_count

    async def _resolve_trees(
        self,
        post_id: PostId,
        roots: list[Comment],
        viewer_id: UserId | None,
        max_depth: int | None = None,
    ) -> list[CommentTreeNode]:
        """Attach visible replies, authors and like state to each root.

        Loads every visible reply of the post in one query and builds a
        parent_id -> children map, instead of querying once per node.
        Replies are walked from the roots only, so nothing below a hidden
        comment is reachable. Replies more than max_depth levels below a
        root are left out.
        """
        replies = await self.comment_repository.find_replies_by_post(
            post_id=post_id, status=CommentStatus.VISIBLE
        )

        # Repository order (oldest first) is kept within each sibling list
        children: dict[CommentId, list[Comment]] = defaultdict(list)
        for reply in replies:
            if reply.parent_id is not None:
                children[reply.parent_id].append(reply)

        reachable: list[Comment] = []
        stack = [(root, 0) for root in roots]
        while stack:
            comment, depth = stack.pop()
            reachable.append(comment)
            if max_depth is not None and depth >= max_depth:
                continue
            stack.extend((child, depth + 1) for child in children.get(comment.id, []))

        authors = await self.user_service.get_users_by_ids(
            [c.author_id for c in reachable]
        )

        liked: set[CommentId] = set()
        if viewer_id is not None:
            liked = await self.comment_like_repository.find_liked_comment_ids(
                user_id=viewer_id, comment_ids=[c.id for c in reachable]
            )

        nodes = {
            comment.id: CommentTreeNode(
                comment=comment,
                author=authors.get(comment.author_id),
                parent_author=None,
                is_liked=comment.id in liked,
            )
            for comment in reachable
        }
        for node in nodes.values():
            for child in children.get(node.comment.id, []):
                child_node = nodes.get(child.id)
                if child_node is None:
                    continue
                child_node.parent_author = node.author
                node.replies.append(child_node)

        return [nodes[root.id] for root in roots]
