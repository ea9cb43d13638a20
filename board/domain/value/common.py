"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable record compared by its field values.

    Used for small composite values such as caller identities and creator
    summaries that travel between layers.
    """

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single validated primitive.

    The wrapped value lives in ``.root`` and ``model_dump()`` returns the
    primitive itself, so these serialise transparently in responses.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
