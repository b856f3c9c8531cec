"""Tests for copy-on-write portion editing on food items."""

import pytest

from meal_planner.domain.nutrition import FoodItem
from tests.conftest import make_portion


def test_add_portion_appends_to_a_copy(apple: FoodItem) -> None:
    cup = make_portion(1, "cup", 125, 65)

    updated = apple.add_portion(cup)

    assert updated.alternative_portions[-1] is cup
    assert len(updated.alternative_portions) == 3
    assert len(apple.alternative_portions) == 2


def test_replace_portion_returns_a_copy(apple: FoodItem) -> None:
    slice_ = make_portion(1, "piece", 28, 14)

    updated = apple.replace_portion(1, slice_)

    assert updated.alternative_portions == (apple.alternative_portions[0], slice_)
    assert updated.portion is apple.portion
    assert apple.alternative_portions[1].quantity.unit.id == "oz"


def test_remove_portion_returns_a_copy(apple: FoodItem) -> None:
    updated = apple.remove_portion(0)

    assert updated.alternative_portions == (apple.alternative_portions[1],)
    assert updated.portion is apple.portion
    assert len(apple.alternative_portions) == 2


def test_removing_every_alternative_keeps_the_primary(apple: FoodItem) -> None:
    updated = apple.remove_portion(0).remove_portion(0)

    assert updated.alternative_portions == ()
    assert updated.portions == (apple.portion,)


def test_out_of_range_index_raises(apple: FoodItem) -> None:
    with pytest.raises(IndexError):
        apple.replace_portion(2, make_portion(1, "cup", 125, 65))
    with pytest.raises(IndexError):
        apple.remove_portion(5)

    assert len(apple.alternative_portions) == 2
