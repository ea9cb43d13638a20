"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from board.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_string(value: Any, field: str, allow_empty: bool = False) -> str:
    """Check the shape of a raw string input.

    Request models accept loosely typed fields so that the credential is
    verified before input shape; this is the second step of that order.

    Raises:
        ValidationError: If value is not a string, or is empty when not allowed
    """
    if not isinstance(value, str):
        raise ValidationError(f"'{field}' must be a string")
    if not allow_empty and len(value) == 0:
        raise ValidationError(f"'{field}' cannot be empty")
    return value
