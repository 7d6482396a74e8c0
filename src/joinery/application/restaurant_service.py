"""Customers, waiters, and the meals that join them."""

import logging

from joinery.application.associations import joins_for, related
from joinery.application.dto import MealSummary
from joinery.application.ports import Registry
from joinery.config import Settings
from joinery.domain import Customer, Meal, Waiter
from joinery.infrastructure import InMemoryRegistry

logger = logging.getLogger(__name__)


class RestaurantService:
    """Customer has many waiters through meals; waiter has many customers through meals."""

    def __init__(
        self,
        *,
        customers: Registry[Customer] | None = None,
        waiters: Registry[Waiter] | None = None,
        meals: Registry[Meal] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._customers = customers if customers is not None else InMemoryRegistry("customer")
        self._waiters = waiters if waiters is not None else InMemoryRegistry("waiter")
        self._meals = meals if meals is not None else InMemoryRegistry("meal")
        self._settings = settings or Settings()

    # Construction

    def new_customer(self, name: str, age: int | None = None) -> Customer:
        customer = Customer(name=name, age=age)
        self._customers.register(customer)
        return customer

    def new_waiter(self, name: str, years_experience: int | None = None) -> Waiter:
        waiter = Waiter(name=name, years_experience=years_experience)
        self._waiters.register(waiter)
        return waiter

    def new_meal(
        self,
        customer: Customer,
        waiter: Waiter,
        total: float,
        tip: float | None = None,
    ) -> Meal:
        """Create and register a meal. Omitted tip falls back to settings.default_tip."""
        if tip is None:
            tip = self._settings.default_tip
        meal = Meal(customer=customer, waiter=waiter, total=total, tip=tip)
        self._meals.register(meal)
        logger.debug(
            "Meal %s: customer=%s waiter=%s total=%s tip=%s",
            meal.id,
            customer.id,
            waiter.id,
            total,
            tip,
        )
        return meal

    def customer_new_meal(
        self,
        customer: Customer,
        waiter: Waiter,
        total: float,
        tip: float | None = None,
    ) -> Meal:
        """Meal created from the customer's side."""
        return self.new_meal(customer, waiter, total, tip)

    def waiter_new_meal(
        self,
        waiter: Waiter,
        customer: Customer,
        total: float,
        tip: float | None = None,
    ) -> Meal:
        """Meal created from the waiter's side."""
        return self.new_meal(customer, waiter, total, tip)

    def new_meal_with_suggested_tip(
        self, customer: Customer, waiter: Waiter, total: float
    ) -> Meal:
        """Meal whose tip is total * settings.suggested_tip_rate, rounded to cents."""
        tip = round(total * self._settings.suggested_tip_rate, 2)
        return self.new_meal(customer, waiter, total, tip)

    # Registries

    def all_customers(self) -> list[Customer]:
        return self._customers.all()

    def all_waiters(self) -> list[Waiter]:
        return self._waiters.all()

    def all_meals(self) -> list[Meal]:
        return self._meals.all()

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get_by_id(customer_id)

    def get_waiter(self, waiter_id: str) -> Waiter | None:
        return self._waiters.get_by_id(waiter_id)

    def get_meal(self, meal_id: str) -> Meal | None:
        return self._meals.get_by_id(meal_id)

    # Traversal

    def customer_meals(self, customer: Customer) -> list[Meal]:
        return joins_for(self._meals, customer, "customer")

    def customer_waiters(self, customer: Customer, *, distinct: bool = False) -> list[Waiter]:
        """Waiters who served the customer, one per meal unless distinct."""
        return related(self._meals, customer, "customer", "waiter", distinct=distinct)

    def waiter_meals(self, waiter: Waiter) -> list[Meal]:
        return joins_for(self._meals, waiter, "waiter")

    def waiter_customers(self, waiter: Waiter, *, distinct: bool = False) -> list[Customer]:
        """Customers the waiter served, one per meal unless distinct."""
        return related(self._meals, waiter, "waiter", "customer", distinct=distinct)

    # Queries

    def oldest_customer(self) -> Customer | None:
        """Customer with the greatest age. Ties go to the first registered."""
        oldest = None
        for customer in self._customers.all():
            if customer.age is None:
                continue
            if oldest is None or customer.age > oldest.age:
                oldest = customer
        return oldest

    def best_tipper(self, waiter: Waiter) -> Customer | None:
        best = None
        for meal in self.waiter_meals(waiter):
            if best is None or meal.tip > best.tip:
                best = meal
        return best.customer if best else None

    def worst_tipped_meal(self, waiter: Waiter) -> Meal | None:
        worst = None
        for meal in self.waiter_meals(waiter):
            if worst is None or meal.tip < worst.tip:
                worst = meal
        return worst

    def most_frequent_customer(self, waiter: Waiter) -> Customer | None:
        """Customer with the most meals served by the waiter. Ties go to the first seen."""
        counts: dict[str, int] = {}
        first_seen: dict[str, Customer] = {}
        for customer in self.waiter_customers(waiter):
            counts[customer.id] = counts.get(customer.id, 0) + 1
            first_seen.setdefault(customer.id, customer)
        if not counts:
            return None
        # max keeps the first of equal keys
        return max(first_seen.values(), key=lambda customer: counts[customer.id])

    def meal_summaries(self, customer: Customer) -> list[MealSummary]:
        out = []
        for meal in self.customer_meals(customer):
            out.append(
                MealSummary(
                    meal_id=meal.id,
                    customer_name=meal.customer.name,
                    waiter_name=meal.waiter.name,
                    total=meal.total,
                    tip=meal.tip,
                    created_at=meal.created_at,
                )
            )
        return out
