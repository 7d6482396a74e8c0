"""
Joinery: has-many-through associations, clean-architecture layout.

- domain: entities (Customer, Waiter, Meal; Artist, Genre, Song). No outer dependencies.
- application: services (RestaurantService, CatalogService), traversal, ports (Registry), DTOs.
- infrastructure: adapters (InMemoryRegistry).
"""

from joinery.application import (
    CatalogService,
    MealSummary,
    Registry,
    RestaurantService,
    joins_for,
    related,
)
from joinery.config import Settings, configure_logging, load_settings
from joinery.domain import Artist, Customer, Genre, Meal, Song, Waiter
from joinery.infrastructure import InMemoryRegistry

__all__ = [
    "Artist",
    "CatalogService",
    "Customer",
    "Genre",
    "InMemoryRegistry",
    "Meal",
    "MealSummary",
    "Registry",
    "RestaurantService",
    "Settings",
    "Song",
    "Waiter",
    "configure_logging",
    "joins_for",
    "load_settings",
    "related",
]
