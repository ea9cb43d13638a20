"""Domain value objects for postboard."""

from board.domain.value.identifiers import PostId, UserId
from board.domain.value.types import (
    AuthPayload,
    CreatorSummary,
    DisplayName,
    Email,
    EngagementOperation,
    EngagementState,
    Reaction,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "AuthPayload",
    "CreatorSummary",
    "DisplayName",
    "Email",
    "EngagementOperation",
    "EngagementState",
    "Reaction",
    "UserRole",
]
