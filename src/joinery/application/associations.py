"""Has-many-through traversal over a registry of joining records.

A joining record (Meal, Song) references one owner on each side. Both
directions use the same two functions; only the attribute names change:

    joins_for(meals, customer, via="customer")            -> customer's meals
    related(meals, customer, via="customer", target="waiter")   -> waiters
    related(meals, waiter, via="waiter", target="customer")     -> customers

Ownership is decided by ``id``, not by ``==``.
"""

from typing import Any

from joinery.application.ports import Registry


def joins_for(joins: Registry[Any], owner: Any, via: str) -> list[Any]:
    """Return the records whose ``via`` reference is ``owner``, in registry order."""
    return [record for record in joins.all() if getattr(record, via).id == owner.id]


def related(
    joins: Registry[Any],
    owner: Any,
    via: str,
    target: str,
    *,
    distinct: bool = False,
) -> list[Any]:
    """Return the ``target`` reference of each of ``owner``'s records.

    Duplicates are kept unless ``distinct`` is set, in which case only the
    first occurrence of each id is returned.
    """
    out = [getattr(record, target) for record in joins_for(joins, owner, via)]
    if not distinct:
        return out
    seen: set[str] = set()
    unique = []
    for entity in out:
        if entity.id in seen:
            continue
        seen.add(entity.id)
        unique.append(entity)
    return unique
