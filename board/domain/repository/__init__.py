"""Repository interfaces for postboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.engagement import EngagementRepository
from board.domain.repository.post import PostRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "EngagementRepository",
]
