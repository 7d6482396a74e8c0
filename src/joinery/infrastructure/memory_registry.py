"""In-memory implementation of Registry (no DB)."""

import logging
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRegistry(Generic[T]):
    """Stores instances in memory. Order preserved by insertion.
    Registering the same instance twice stores it twice.
    """

    def __init__(self, kind: str = "record") -> None:
        self.kind = kind
        self._items: list[T] = []

    def register(self, instance: T) -> None:
        self._items.append(instance)
        logger.debug("Registered %s #%d", self.kind, len(self._items))

    def all(self) -> list[T]:
        return list(self._items)

    def get_by_id(self, instance_id: str) -> T | None:
        for item in self._items:
            if getattr(item, "id", None) == instance_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)
