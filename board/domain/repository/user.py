"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from board.domain.model.user import User
from board.domain.value import UserId
from board.domain.value.types import Email


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Users that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If the email is already registered
        """
        pass
