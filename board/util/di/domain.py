"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings
from board.domain.repository import (
    EngagementRepository,
    PostRepository,
    UserRepository,
)
from board.domain.service import (
    EngagementResolver,
    EngagementService,
    HashService,
    IdGenerator,
    JWTService,
    PostService,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stateless collaborators are APP-scoped. Services that hold repositories
    are REQUEST-scoped to align with the repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_hash_service(self, auth_settings: AuthSettings) -> HashService:
        """Provide password hashing service."""
        return HashService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_id_generator(self) -> IdGenerator:
        return IdGenerator()

    @provide(scope=Scope.APP)
    def get_engagement_resolver(self) -> EngagementResolver:
        return EngagementResolver()

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        user_repository: UserRepository,
        id_generator: IdGenerator,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            engagement_repository=engagement_repository,
            user_repository=user_repository,
            id_generator=id_generator,
        )

    @provide
    def get_engagement_service(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        resolver: EngagementResolver,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            post_repository=post_repository,
            engagement_repository=engagement_repository,
            resolver=resolver,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        hash_service: HashService,
        id_generator: IdGenerator,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            hash_service=hash_service,
            id_generator=id_generator,
        )
