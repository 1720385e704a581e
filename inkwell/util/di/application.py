"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    ModerateCommentUseCase,
    ToggleLikeUseCase,
)
from inkwell.application.usecase.post import PublishScheduledPostsUseCase
from inkwell.config import CommentSettings
from inkwell.domain.service import (
    CommentLikeService,
    CommentService,
    JWTService,
    PostService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            comment_service=comment_service,
            comment_like_service=comment_like_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_publish_scheduled_posts_use_case(
        self, post_service: PostService
    ) -> PublishScheduledPostsUseCase:
        """Provide publish scheduled posts use case."""
        return PublishScheduledPostsUseCase(post_service=post_service)
