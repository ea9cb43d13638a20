"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; state changes produce a new instance through
    ``model_copy`` so a loaded entity never changes under a caller's feet.
    """

    model_config = ConfigDict(frozen=True)


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)
