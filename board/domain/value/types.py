"""Domain value objects for postboard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject, ValueObject
from board.domain.value.identifiers import UserId

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRole(str, Enum):
    """Role carried by every user and embedded in their token."""

    NORMAL = "NORMAL"
    ADMIN = "ADMIN"


class Reaction(str, Enum):
    """Reaction a caller asks to register on a post."""

    LIKE = "like"
    DISLIKE = "dislike"

    @classmethod
    def from_flag(cls, like: bool) -> "Reaction":
        """Map the boolean ``like`` flag used on the wire to a reaction."""
        return cls.LIKE if like else cls.DISLIKE


class EngagementState(str, Enum):
    """Relationship between one user and one post."""

    NONE = "none"
    LIKED = "liked"
    DISLIKED = "disliked"


class EngagementOperation(str, Enum):
    """Storage operation needed on the engagement row for a transition."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class Email(RootValueObject[str]):
    """Email address used as the login identifier."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the address has a local part, a domain and a TLD."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_RE.match(v):
            raise ValueError("Email must be a valid address")
        return v


class DisplayName(RootValueObject[str]):
    """Name shown next to a user's posts."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Name must be 1-100 characters")
        return v


class AuthPayload(ValueObject):
    """Identity of the caller, derived from a verified token.

    Lives for one request only and is never persisted.
    """

    id: UserId
    name: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class CreatorSummary(ValueObject):
    """Creator snapshot embedded in a post's public view."""

    id: UserId
    name: str
