"""Recipe domain models."""

from dataclasses import dataclass, field
from enum import Enum

from meal_planner.domain.nutrition import Nutrition, Quantity


class RecipeCategory(Enum):
    """Recipe categories."""

    APPETIZER = "Appetizer"
    BEVERAGE = "Beverage"
    BREAKFAST = "Breakfast"
    BREAD = "Bread"
    PASTA = "Pasta"
    BEEF = "Beef"
    PORK = "Pork"
    LAMB = "Lamb"
    POULTRY = "Poultry"
    SEAFOOD = "Seafood"
    VEGETARIAN = "Vegetarian"
    SIDE_DISH = "Side Dish"
    SOUP = "Soup"
    SALAD = "Salad"
    SAUCE = "Sauce"
    DESSERT = "Dessert"


class RecipeDifficulty(Enum):
    """How demanding a recipe is to prepare."""

    EASY = "Easy"
    NORMAL = "Normal"
    ADVANCED = "Advanced"


@dataclass(frozen=True)
class Ingredient:
    """Free-text ingredient with its quantity."""

    name: str
    quantity: Quantity


@dataclass(frozen=True)
class Recipe:
    """Recipe with nutrition computed when it was authored."""

    name: str
    category: RecipeCategory
    difficulty: RecipeDifficulty
    nutrition: Nutrition
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)
    steps: tuple[str, ...] = field(default_factory=tuple)
    id: str | None = None
