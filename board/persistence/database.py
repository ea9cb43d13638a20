"""Async engine and session factory for the PostgreSQL store.

One engine lives for the process; each request gets its own session from the
factory, and that session is the unit of work for the request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine from ``settings.database``.

    SQL echo follows ``settings.debug``.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine``.

    Repositories flush explicitly and the request scope decides between
    commit and rollback, so autoflush is off and loaded rows stay usable
    after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
