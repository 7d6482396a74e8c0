"""Tests for domain entity validation."""

import pytest

from joinery.domain import Artist, Customer, Genre, Meal, Song, Waiter


def test_names_are_stripped_and_required() -> None:
    assert Customer(name="  Sam ").name == "Sam"
    assert Song(name=" Hello ", artist=Artist(name="Adele"), genre=Genre(name="pop")).name == "Hello"
    for kind in (Customer, Waiter, Artist, Genre):
        with pytest.raises(ValueError, match="name must be non-empty"):
            kind(name="   ")


def test_negative_numbers_rejected() -> None:
    with pytest.raises(ValueError, match="age"):
        Customer(name="Sam", age=-1)
    with pytest.raises(ValueError, match="years_experience"):
        Waiter(name="Pat", years_experience=-2)
    sam = Customer(name="Sam")
    pat = Waiter(name="Pat")
    with pytest.raises(ValueError, match="total"):
        Meal(customer=sam, waiter=pat, total=-5)
    with pytest.raises(ValueError, match="tip"):
        Meal(customer=sam, waiter=pat, total=5, tip=-1)


def test_each_entity_gets_its_own_id() -> None:
    a = Customer(name="Sam")
    b = Customer(name="Sam")
    assert a.id != b.id
    assert a != b


def test_customer_fields_are_mutable() -> None:
    sam = Customer(name="Sam", age=30)
    sam.age = 31
    assert sam.age == 31


@pytest.mark.parametrize("field_name", ["total", "tip"])
@pytest.mark.parametrize("value", [None, float("nan"), float("inf")])
def test_meal_amounts_must_be_finite_numbers(field_name, value) -> None:
    amounts = {"total": 10, "tip": 1}
    amounts[field_name] = value
    with pytest.raises(ValueError, match=f"Meal {field_name}"):
        Meal(customer=Customer(name="Sam"), waiter=Waiter(name="Pat"), **amounts)


def test_entities_hash_and_compare_by_id() -> None:
    sam = Customer(name="Sam")
    pat = Waiter(name="Pat")
    meal = Meal(customer=sam, waiter=pat, total=1)
    song = Song(name="Hello", artist=Artist(name="Adele"), genre=Genre(name="pop"))

    assert {meal: "dinner"}[meal] == "dinner"
    assert len({song, song}) == 1
    assert len({sam, pat, Customer(name="Sam")}) == 3

    renamed = Customer(name="Samuel", id=sam.id)
    assert renamed == sam
    assert hash(renamed) == hash(sam)
    # Same id on a different kind is a different entity.
    assert Waiter(name="Sam", id=sam.id) != sam
