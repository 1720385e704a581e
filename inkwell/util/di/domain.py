"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings
from inkwell.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PostRepository,
    UserRepository,
)
from inkwell.domain.service import (
    CommentLikeService,
    CommentService,
    JWTService,
    PostService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_like_repository=comment_like_repository,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_comment_like_service(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            comment_like_repository=comment_like_repository,
            comment_service=comment_service,
        )
