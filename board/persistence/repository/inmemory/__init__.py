"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .engagement import InMemoryEngagementRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryEngagementRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
