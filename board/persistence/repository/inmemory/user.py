"""In-memory user repository for testing."""

from typing import Optional, Sequence

from board.domain.error import ConflictError
from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import UserId
from board.domain.value.types import Email

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._db.users[uid] for uid in user_ids if uid in self._db.users]

    async def save(self, user: User) -> User:
        """Insert a user.

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.find_by_email(user.email):
            raise ConflictError("Email is already registered")
        self._db.users[user.id] = user
        return user
