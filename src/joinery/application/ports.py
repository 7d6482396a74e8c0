"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol, TypeVar

T = TypeVar("T")


class Registry(Protocol[T]):
    """Holds every instance of one entity kind, in creation order. Append-only."""

    def register(self, instance: T) -> None:
        """Append an instance. Always succeeds; no duplicate check."""
        ...

    def all(self) -> list[T]:
        """Return all registered instances in creation order."""
        ...

    def get_by_id(self, instance_id: str) -> T | None:
        """Return the first instance with the given id, or None."""
        ...
