"""Nutrition domain models."""

from dataclasses import dataclass, field, replace
from enum import Enum

from meal_planner.domain.units import UnitOfMeasure


@dataclass(frozen=True)
class Nutrition:
    """Nutrient content of an implicit serving."""

    calories: float
    protein: float
    fat: float
    carbs: float
    sugar: float
    sodium: float

    @classmethod
    def zero(cls) -> "Nutrition":
        """Return an all-zero nutrition record."""
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Quantity:
    """An amount expressed in a unit of measure."""

    amount: float
    unit: UnitOfMeasure


@dataclass(frozen=True)
class Portion:
    """Reference serving: a quantity, its gram weight and its nutrients."""

    quantity: Quantity
    gram_weight: float
    nutrition: Nutrition


class FoodCategory(Enum):
    """Food categories used for browsing."""

    BAKERY = "Bakery"
    BEANS = "Beans"
    BEVERAGES = "Beverages"
    DAIRY = "Dairy"
    FATS_OILS = "Fats & Oils"
    GRAINS = "Grains"
    JUICES = "Juices"
    MEATS = "Meats"
    MIXED_FOODS = "Mixed Foods"
    NUTS_SEEDS = "Nuts & Seeds"
    PRODUCE = "Produce"
    SNACKS = "Snacks"
    SPICES = "Spices"
    SWEETS = "Sweets"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class FoodItem:
    """A food with its primary portion and any alternative portions."""

    name: str
    category: FoodCategory
    portion: Portion
    alternative_portions: tuple[Portion, ...] = field(default_factory=tuple)
    id: str | None = None
    fdc_id: int | None = None
    brand: str | None = None

    @property
    def portions(self) -> tuple[Portion, ...]:
        """Primary portion followed by the alternatives, in order."""
        return (self.portion, *self.alternative_portions)

    def add_portion(self, portion: Portion) -> "FoodItem":
        """Return a copy with an extra alternative portion."""
        return replace(
            self, alternative_portions=(*self.alternative_portions, portion)
        )

    def replace_portion(self, index: int, portion: Portion) -> "FoodItem":
        """Return a copy with the alternative portion at index replaced."""
        portions = list(self.alternative_portions)
        portions[index] = portion
        return replace(self, alternative_portions=tuple(portions))

    def remove_portion(self, index: int) -> "FoodItem":
        """Return a copy without the alternative portion at index."""
        portions = list(self.alternative_portions)
        del portions[index]
        return replace(self, alternative_portions=tuple(portions))
