"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import ConflictError
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import UserId
from board.domain.value.types import Email
from board.persistence.mappers import row_to_user, user_to_dict
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a savepoint so a duplicate email leaves the
        surrounding transaction usable.
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise ConflictError("Email is already registered")
        return user
