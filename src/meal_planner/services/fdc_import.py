"""Conversion of USDA FoodData Central food payloads into food items."""

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from meal_planner.domain.fdc import FdcFoodItem, FdcFoodPortion
from meal_planner.domain.nutrition import (
    FoodCategory,
    FoodItem,
    Nutrition,
    Portion,
    Quantity,
)
from meal_planner.domain.units import UnitOfMeasure
from meal_planner.errors import FdcPayloadError
from meal_planner.services.nutrition import round_half_up
from meal_planner.services.units import (
    FALLBACK_UNIT,
    find_by_external_id,
    find_by_token,
    get_unit,
)

# FDC nutrient numbers; nutrient amounts are per 100 g.
_NUTRIENT_NUMBERS = {
    "calories": "208",
    "protein": "203",
    "fat": "204",
    "carbs": "205",
    "sugar": "269.3",
    "sodium": "307",
}

_BASE_GRAMS = 100.0

_CATEGORY_CODES: dict[str, FoodCategory] = {
    "0100": FoodCategory.DAIRY,
    "0200": FoodCategory.SPICES,
    "0400": FoodCategory.FATS_OILS,
    "0500": FoodCategory.MEATS,
    "0700": FoodCategory.MEATS,
    "1000": FoodCategory.MEATS,
    "1300": FoodCategory.MEATS,
    "1500": FoodCategory.MEATS,
    "1700": FoodCategory.MEATS,
    "0600": FoodCategory.MIXED_FOODS,
    "2100": FoodCategory.MIXED_FOODS,
    "2200": FoodCategory.MIXED_FOODS,
    "3500": FoodCategory.MIXED_FOODS,
    "3600": FoodCategory.MIXED_FOODS,
    "0800": FoodCategory.GRAINS,
    "2000": FoodCategory.GRAINS,
    "0900": FoodCategory.PRODUCE,
    "1100": FoodCategory.PRODUCE,
    "1200": FoodCategory.NUTS_SEEDS,
    "1400": FoodCategory.BEVERAGES,
    "1410": FoodCategory.BEVERAGES,
    "1600": FoodCategory.BEANS,
    "1800": FoodCategory.BAKERY,
    "1900": FoodCategory.SWEETS,
    "2500": FoodCategory.SNACKS,
}

_logger = logging.getLogger(__name__)


@dataclass
class FdcImportService:
    """Builds food items from FDC food details."""

    excluded_portion_units: frozenset[str] = field(
        default_factory=lambda: frozenset({"RACC"})
    )
    portion_precision: int = 2
    debug: bool = False

    def convert(self, payload: dict[str, object] | FdcFoodItem) -> FoodItem:
        """Convert an FDC food payload into a food item with its portions."""
        fdc_food = self._parse(payload)
        base = _extract_nutrition(fdc_food)
        food = FoodItem(
            name=fdc_food.description,
            category=category_for_code(
                fdc_food.food_category.code if fdc_food.food_category else None
            ),
            portion=Portion(
                quantity=Quantity(amount=_BASE_GRAMS, unit=get_unit("g")),
                gram_weight=_BASE_GRAMS,
                nutrition=base,
            ),
            fdc_id=fdc_food.fdc_id,
        )
        for fdc_portion in fdc_food.food_portions:
            abbreviation = fdc_portion.measure_unit.abbreviation
            if abbreviation in self.excluded_portion_units:
                if self.debug:
                    _logger.info(
                        "FDC import skipped portion: fdc_id=%s unit=%s",
                        fdc_food.fdc_id,
                        abbreviation,
                    )
                continue
            food = food.add_portion(self._portion(base, fdc_portion))
        return food

    def _parse(self, payload: dict[str, object] | FdcFoodItem) -> FdcFoodItem:
        if isinstance(payload, FdcFoodItem):
            return payload
        try:
            return FdcFoodItem.model_validate(payload)
        except ValidationError as exc:
            raise FdcPayloadError(f"Invalid FDC food payload: {exc}") from exc

    def _portion(self, base: Nutrition, fdc_portion: FdcFoodPortion) -> Portion:
        factor = fdc_portion.gram_weight / _BASE_GRAMS
        places = self.portion_precision
        return Portion(
            quantity=Quantity(
                amount=fdc_portion.amount,
                unit=_portion_unit(fdc_portion),
            ),
            gram_weight=fdc_portion.gram_weight,
            nutrition=Nutrition(
                calories=round_half_up(base.calories * factor, places),
                protein=round_half_up(base.protein * factor, places),
                fat=round_half_up(base.fat * factor, places),
                carbs=round_half_up(base.carbs * factor, places),
                sugar=round_half_up(base.sugar * factor, places),
                sodium=round_half_up(base.sodium * factor, places),
            ),
        )


def category_for_code(code: str | None) -> FoodCategory:
    """Map an FDC food category code to a food category."""
    if code is None:
        return FoodCategory.UNKNOWN
    return _CATEGORY_CODES.get(code, FoodCategory.UNKNOWN)


def _portion_unit(fdc_portion: FdcFoodPortion) -> UnitOfMeasure:
    measure_unit = fdc_portion.measure_unit
    if measure_unit.id is not None:
        unit = find_by_external_id(measure_unit.id)
        if unit is not FALLBACK_UNIT:
            return unit
    return find_by_token(measure_unit.abbreviation)


def _extract_nutrition(fdc_food: FdcFoodItem) -> Nutrition:
    """Extract the six tracked nutrients; missing ones are 0."""
    amounts: dict[str, float] = {}
    for food_nutrient in fdc_food.food_nutrients:
        if food_nutrient.amount is not None:
            amounts.setdefault(food_nutrient.nutrient.number, food_nutrient.amount)
    return Nutrition(
        **{
            name: float(amounts.get(number, 0.0))
            for name, number in _NUTRIENT_NUMBERS.items()
        }
    )
