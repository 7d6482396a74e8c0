"""Infrastructure layer: concrete implementations of application ports."""

from joinery.infrastructure.memory_registry import InMemoryRegistry

__all__ = ["InMemoryRegistry"]
