"""Persistence component.

``PersistenceProvider`` names the component; ``ProdPersistenceProvider``
backs the repositories with PostgreSQL. The in-memory variant used by tests
lives in ``tests/di/persistence.py``.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import (
    EngagementRepository,
    PostRepository,
    UserRepository,
)
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresEngagementRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Process-wide engine; its pool is disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Unit of work for one request.

        Commits when the request scope closes cleanly and rolls back when it
        closes with an error. A reaction's engagement row and the post's
        counters are therefore written together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_engagement_repository(
        self, session: AsyncSession
    ) -> EngagementRepository:
        return PostgresEngagementRepository(session)
