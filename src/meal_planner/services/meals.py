"""Meal building and nutrition totals for meals and plans."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from meal_planner.domain.meals import Meal, MealItem, MealPlan
from meal_planner.domain.nutrition import FoodItem, Nutrition, Quantity
from meal_planner.domain.recipes import Recipe
from meal_planner.domain.units import UnitOfMeasure
from meal_planner.services.nutrition import (
    scale_nutrition,
    scaled_nutrition,
    sum_nutrition,
)
from meal_planner.services.units import find_unit_of_measure, get_unit

_logger = logging.getLogger(__name__)


@dataclass
class MealService:
    """Service that freezes scaled nutrition into meal items and totals them."""

    debug: bool = False

    def create_food_item(
        self, food: FoodItem, amount: float, unit: UnitOfMeasure | str | int
    ) -> MealItem | None:
        """Build a meal item for a food, or None if the unit has no conversion."""
        quantity = Quantity(amount=amount, unit=_resolve_unit(unit))
        nutrition = scaled_nutrition(food, quantity)
        if nutrition is None:
            if self.debug:
                _logger.info(
                    "Meal item unavailable: food=%s unit=%s",
                    food.name,
                    quantity.unit.id,
                )
            return None
        return MealItem(
            name=food.name,
            quantity=quantity,
            nutrition=nutrition,
            food_id=food.id,
        )

    def create_recipe_item(self, recipe: Recipe, servings: float) -> MealItem:
        """Build a meal item for a number of servings of a recipe."""
        return MealItem(
            name=recipe.name,
            quantity=Quantity(amount=servings, unit=get_unit("serving")),
            nutrition=scale_nutrition(recipe.nutrition, servings),
            recipe_id=recipe.id,
        )

    def meal_nutrients(self, meal: Meal) -> Nutrition:
        """Return the total nutrition of a meal."""
        return sum_nutrition(item.nutrition for item in meal.items)

    def daily_plan_nutrients(self, plan: MealPlan) -> Nutrition:
        """Return the total nutrition of a day's meal plan."""
        return sum_nutrition(self.meal_nutrients(meal) for meal in plan.meals)

    def multi_day_plan_nutrients(self, plans: Iterable[MealPlan]) -> Nutrition:
        """Return the total nutrition across several meal plans."""
        return sum_nutrition(self.daily_plan_nutrients(plan) for plan in plans)


def _resolve_unit(unit: UnitOfMeasure | str | int) -> UnitOfMeasure:
    if isinstance(unit, UnitOfMeasure):
        return unit
    return find_unit_of_measure(unit)
