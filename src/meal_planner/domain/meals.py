"""Domain models for meals and meal plans."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from meal_planner.domain.nutrition import Nutrition, Quantity


class MealType(Enum):
    """Time of day a meal is eaten."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


@dataclass(frozen=True)
class MealItem:
    """Food or recipe in a meal with nutrition frozen when it was added."""

    name: str
    quantity: Quantity
    nutrition: Nutrition
    food_id: str | None = None
    recipe_id: str | None = None


@dataclass(frozen=True)
class Meal:
    """Ordered list of meal items."""

    name: str
    type: MealType
    items: tuple[MealItem, ...] = field(default_factory=tuple)
    id: str | None = None


@dataclass(frozen=True)
class MealPlan:
    """Meals planned for one day."""

    date: date
    meals: tuple[Meal, ...] = field(default_factory=tuple)
    id: str | None = None
