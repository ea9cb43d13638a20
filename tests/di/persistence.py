"""Mock persistence providers for testing."""

from dishka import Scope, provide

from board.domain.repository import (
    EngagementRepository,
    PostRepository,
    UserRepository,
)
from board.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEngagementRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The in-memory database is APP-scoped, so every request made against one
    container sees the same data. Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: InMemoryDatabase) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, database: InMemoryDatabase) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_engagement_repository(
        self, database: InMemoryDatabase
    ) -> EngagementRepository:
        """Provide in-memory engagement repository."""
        return InMemoryEngagementRepository(database)
