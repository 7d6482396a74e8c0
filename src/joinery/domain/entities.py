"""Domain entities: Customer, Waiter, Meal and Artist, Genre, Song."""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_name(kind: str, name: str) -> str:
    if not name or not name.strip():
        raise ValueError(f"{kind} name must be non-empty.")
    return name.strip()


def _require_non_negative(label: str, value: float | int | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{label} must be non-negative.")


def _require_amount(label: str, value: float | int) -> None:
    if value is None or not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} must be a non-negative number, got {value!r}.")


class _Entity:
    """Equality and hashing by id. Requires an ``id`` attribute."""

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))


@dataclass(eq=False)
class Customer(_Entity):
    """
    Someone who eats at the restaurant.
    Meals are not stored here; they reference the customer.
    """

    name: str = field(default="")
    age: int | None = None
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        self.name = _require_name("Customer", self.name)
        _require_non_negative("Customer age", self.age)


@dataclass(eq=False)
class Waiter(_Entity):
    """Someone who serves meals. Symmetric to Customer."""

    name: str = field(default="")
    years_experience: int | None = None
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        self.name = _require_name("Waiter", self.name)
        _require_non_negative("Waiter years_experience", self.years_experience)


@dataclass(frozen=True, eq=False)
class Meal(_Entity):
    """
    Joins one Customer to one Waiter.
    A Meal cannot exist without both; its references never change.
    """

    customer: Customer = field(default=None)
    waiter: Waiter = field(default=None)
    total: float = 0.0
    tip: float = 0.0
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        if self.customer is None:
            raise ValueError("Meal must have an associated Customer.")
        if self.waiter is None:
            raise ValueError("Meal must have an associated Waiter.")
        _require_amount("Meal total", self.total)
        _require_amount("Meal tip", self.tip)


@dataclass(eq=False)
class Artist(_Entity):
    name: str = field(default="")
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        self.name = _require_name("Artist", self.name)


@dataclass(eq=False)
class Genre(_Entity):
    name: str = field(default="")
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        self.name = _require_name("Genre", self.name)


@dataclass(frozen=True, eq=False)
class Song(_Entity):
    """
    Joins one Artist to one Genre.
    A Song cannot exist without both.
    """

    name: str = field(default="")
    artist: Artist = field(default=None)
    genre: Genre = field(default=None)
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        name = _require_name("Song", self.name)
        object.__setattr__(self, "name", name)
        if self.artist is None:
            raise ValueError("Song must have an associated Artist.")
        if self.genre is None:
            raise ValueError("Song must have an associated Genre.")
