"""Shared test fixtures."""

from datetime import date

import pytest

from meal_planner.config import Settings
from meal_planner.domain.meals import Meal, MealItem, MealPlan, MealType
from meal_planner.domain.nutrition import (
    FoodCategory,
    FoodItem,
    Nutrition,
    Portion,
    Quantity,
)
from meal_planner.domain.recipes import (
    Ingredient,
    Recipe,
    RecipeCategory,
    RecipeDifficulty,
)
from meal_planner.services.meals import MealService
from meal_planner.services.units import get_unit


def make_portion(  # noqa: PLR0913
    amount: float,
    unit_id: str,
    gram_weight: float,
    calories: float,
    protein: float = 0.0,
    fat: float = 0.0,
    carbs: float = 0.0,
    sugar: float = 0.0,
    sodium: float = 0.0,
) -> Portion:
    """Build a portion from plain values."""
    return Portion(
        quantity=Quantity(amount=amount, unit=get_unit(unit_id)),
        gram_weight=gram_weight,
        nutrition=Nutrition(calories, protein, fat, carbs, sugar, sodium),
    )


def make_item(name: str, calories: float, protein: float = 0.0) -> MealItem:
    """Build a meal item with precomputed nutrition."""
    return MealItem(
        name=name,
        quantity=Quantity(amount=1, unit=get_unit("serving")),
        nutrition=Nutrition(calories, protein, 1.0, 2.0, 3.0, 4.0),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def apple() -> FoodItem:
    return FoodItem(
        id="apple",
        name="Apple",
        category=FoodCategory.PRODUCE,
        portion=make_portion(100, "g", 100, 98, 0.3, 0.2, 25, 19, 1),
        alternative_portions=(
            make_portion(1, "each", 115, 113, 0.3, 0.2, 29, 22, 1),
            make_portion(4, "oz", 112, 110, 0.3, 0.2, 28, 21, 1),
        ),
    )


@pytest.fixture
def chicken_breast() -> FoodItem:
    return FoodItem(
        id="chicken",
        name="Chicken breast",
        category=FoodCategory.MEATS,
        portion=make_portion(100, "g", 100, 165, 31, 3.6, 0, 0, 74),
        alternative_portions=(make_portion(4, "oz", 113.4, 187, 35, 4, 0, 0, 84),),
    )


@pytest.fixture
def milk() -> FoodItem:
    return FoodItem(
        id="milk",
        name="Milk",
        category=FoodCategory.DAIRY,
        portion=make_portion(1, "cup", 244, 122, 8, 4.8, 12, 12, 115),
        alternative_portions=(make_portion(100, "ml", 103, 50, 3.3, 2, 4.9, 5, 47),),
    )


@pytest.fixture
def pancakes() -> Recipe:
    return Recipe(
        id="pancakes",
        name="Pancakes",
        category=RecipeCategory.BREAKFAST,
        difficulty=RecipeDifficulty.EASY,
        nutrition=Nutrition(227, 6, 9, 30, 6, 439),
        ingredients=(
            Ingredient("Flour", Quantity(1.5, get_unit("cup"))),
            Ingredient("Milk", Quantity(1.25, get_unit("cup"))),
            Ingredient("Eggs", Quantity(1, get_unit("each"))),
            Ingredient("Butter", Quantity(3, get_unit("tbsp"))),
        ),
        steps=("Whisk the dry ingredients.", "Add wet ingredients.", "Fry."),
    )


@pytest.fixture
def omelette() -> Recipe:
    return Recipe(
        id="omelette",
        name="Omelette",
        category=RecipeCategory.BREAKFAST,
        difficulty=RecipeDifficulty.NORMAL,
        nutrition=Nutrition(300, 20, 22, 2, 1, 400),
        ingredients=(
            Ingredient("eggs", Quantity(3, get_unit("each"))),
            Ingredient("Milk", Quantity(4, get_unit("tbsp"))),
            Ingredient("Butter", Quantity(14, get_unit("g"))),
        ),
    )


@pytest.fixture
def meal_service() -> MealService:
    return MealService()


@pytest.fixture
def meal_plan() -> MealPlan:
    return MealPlan(
        id="plan-1",
        date=date(2024, 5, 6),
        meals=(
            Meal(
                name="Breakfast",
                type=MealType.BREAKFAST,
                items=(make_item("Oats", 300, 10), make_item("Banana", 105, 1)),
            ),
            Meal(
                name="Dinner",
                type=MealType.DINNER,
                items=(make_item("Salmon", 600, 50),),
            ),
        ),
    )
