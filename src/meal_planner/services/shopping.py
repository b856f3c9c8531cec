"""Shopping list aggregation across recipes."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from meal_planner.domain.nutrition import Quantity
from meal_planner.domain.recipes import Recipe
from meal_planner.errors import InvalidConversionError
from meal_planner.services.conversion import convert_amount

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShoppingListItem:
    """Combined quantity of one ingredient."""

    name: str
    quantity: Quantity


def build_shopping_list(
    recipes: Iterable[Recipe], multipliers: Mapping[str, float] | None = None
) -> list[ShoppingListItem]:
    """Combine ingredient quantities across recipes.

    Ingredients are grouped by case-insensitive name. A quantity is added to
    the first line of its group whose unit it converts into; otherwise it
    starts a new line.
    """
    if multipliers is None:
        multipliers = {}

    consolidated: dict[str, list[ShoppingListItem]] = {}
    for recipe in recipes:
        multiplier = multipliers.get(recipe.id, 1.0) if recipe.id else 1.0
        for ingredient in recipe.ingredients:
            key = ingredient.name.strip().lower()
            quantity = Quantity(
                amount=ingredient.quantity.amount * multiplier,
                unit=ingredient.quantity.unit,
            )
            lines = consolidated.setdefault(key, [])
            _merge(lines, ingredient.name.strip(), quantity)

    shopping_items = [item for lines in consolidated.values() for item in lines]
    shopping_items.sort(key=lambda x: (x.name.lower(), x.quantity.unit.id))
    return shopping_items


def _merge(lines: list[ShoppingListItem], name: str, quantity: Quantity) -> None:
    for index, line in enumerate(lines):
        try:
            converted = convert_amount(quantity, line.quantity.unit)
        except InvalidConversionError:
            continue
        lines[index] = ShoppingListItem(
            name=line.name,
            quantity=Quantity(
                amount=line.quantity.amount + converted.amount,
                unit=line.quantity.unit,
            ),
        )
        return
    if lines:
        _logger.debug(
            "Shopping list keeps %s %s separate for %s",
            quantity.amount,
            quantity.unit.id,
            name,
        )
    lines.append(ShoppingListItem(name=name, quantity=quantity))
