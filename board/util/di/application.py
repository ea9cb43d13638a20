"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.auth import LoginUseCase, SignupUseCase
from board.application.usecase.engagement import ReactToPostUseCase
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    EditPostUseCase,
    ListPostsUseCase,
)
from board.domain.service import (
    EngagementService,
    JWTService,
    PostService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, jwt_service: JWTService, post_service: PostService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(jwt_service=jwt_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, jwt_service: JWTService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(jwt_service=jwt_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_post_use_case(
        self, jwt_service: JWTService, post_service: PostService
    ) -> EditPostUseCase:
        """Provide edit post use case."""
        return EditPostUseCase(jwt_service=jwt_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, jwt_service: JWTService, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(jwt_service=jwt_service, post_service=post_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_react_to_post_use_case(
        self, jwt_service: JWTService, engagement_service: EngagementService
    ) -> ReactToPostUseCase:
        """Provide react to post use case."""
        return ReactToPostUseCase(
            jwt_service=jwt_service, engagement_service=engagement_service
        )
