"""Nutrition scaling from reference portions and nutrition totals."""

import logging
import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from meal_planner.domain.nutrition import FoodItem, Nutrition, Portion, Quantity
from meal_planner.errors import InvalidConversionError
from meal_planner.services.conversion import convert_quantity

_logger = logging.getLogger(__name__)

# Enough digits for any finite float at whole-unit precision.
_FLOAT_DIGITS = 310


def round_half_up(value: float, places: int = 0) -> float:
    """Round to the given number of decimal places, halves away from zero.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as context:
        context.prec = _FLOAT_DIGITS + max(places, 0)
        rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    return float(rounded)


def fit_score(portion: Portion, requested: Quantity) -> float:
    """Score how close a portion is to the requested quantity, in [0, 1].

    Incompatible units and portions without a positive amount score 0.
    """
    if portion.quantity.amount <= 0:
        return 0.0
    try:
        factor = convert_quantity(portion.quantity, requested)
    except InvalidConversionError:
        return 0.0
    if factor > 1:
        return 1 / factor
    return max(factor, 0.0)


def best_fit_portion(food: FoodItem, requested: Quantity) -> Portion | None:
    """Return the portion to scale from, or None if no portion is compatible.

    The primary portion is checked first, then alternatives in order; the
    first portion with the highest score wins.
    """
    best: Portion | None = None
    best_score = 0.0
    for portion in food.portions:
        score = fit_score(portion, requested)
        if score > best_score:
            best, best_score = portion, score
    return best


def scale_nutrition(nutrition: Nutrition, factor: float) -> Nutrition:
    """Multiply every nutrient by factor, rounding to whole units."""
    return Nutrition(
        calories=round_half_up(nutrition.calories * factor),
        protein=round_half_up(nutrition.protein * factor),
        fat=round_half_up(nutrition.fat * factor),
        carbs=round_half_up(nutrition.carbs * factor),
        sugar=round_half_up(nutrition.sugar * factor),
        sodium=round_half_up(nutrition.sodium * factor),
    )


def scaled_nutrition(food: FoodItem, requested: Quantity) -> Nutrition | None:
    """Nutrition of food at the requested quantity, or None when unavailable.

    None means no portion of the food can be converted to the requested unit;
    it is not the same as zero nutrition.
    """
    portion = best_fit_portion(food, requested)
    if portion is None:
        _logger.debug(
            "No compatible portion for %s at %s %s",
            food.name,
            requested.amount,
            requested.unit.id,
        )
        return None
    factor = convert_quantity(portion.quantity, requested)
    return scale_nutrition(portion.nutrition, factor)


def sum_nutrition(items: Iterable[Nutrition]) -> Nutrition:
    """Field-by-field sum, starting from zero. No rounding is applied."""
    total = Nutrition.zero()
    for item in items:
        total = Nutrition(
            calories=total.calories + item.calories,
            protein=total.protein + item.protein,
            fat=total.fat + item.fat,
            carbs=total.carbs + item.carbs,
            sugar=total.sugar + item.sugar,
            sodium=total.sodium + item.sodium,
        )
    return total
