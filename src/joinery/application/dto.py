"""Read models returned by the services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MealSummary:
    meal_id: str
    customer_name: str
    waiter_name: str
    total: float
    tip: float
    created_at: datetime
