"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import RootModel, ConfigDict

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The model wraps a single value (accessed via .root) and model_dump()
    returns the primitive value, not a dict.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
