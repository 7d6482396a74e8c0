"""Application layer: services, traversal, ports, and DTOs."""

from joinery.application.associations import joins_for, related
from joinery.application.catalog_service import CatalogService
from joinery.application.dto import MealSummary
from joinery.application.ports import Registry
from joinery.application.restaurant_service import RestaurantService

__all__ = [
    "CatalogService",
    "MealSummary",
    "Registry",
    "RestaurantService",
    "joins_for",
    "related",
]
