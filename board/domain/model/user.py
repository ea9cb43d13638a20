"""User aggregate root.

Users register with a name, email and password. They are referenced by
posts and engagements but never modified by the posting flows.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel, utc_now
from board.domain.value import UserId, UserRole
from board.domain.value.types import DisplayName, Email


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: DisplayName
    email: Email
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.NORMAL
    created_at: datetime = Field(default_factory=utc_now)
