"""Domain layer: entities. No dependencies on outer layers."""

from joinery.domain.entities import Artist, Customer, Genre, Meal, Song, Waiter

__all__ = ["Artist", "Customer", "Genre", "Meal", "Song", "Waiter"]
