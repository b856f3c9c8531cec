"""Catalog of recognized units of measure and lookups into it."""

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from meal_planner.domain.units import Dimension, MeasurementSystem, UnitOfMeasure
from meal_planner.errors import UnknownUnitError

FALLBACK_UNIT_ID = "item"
FALLBACK_EXTERNAL_ID = 9999

_SHORTHAND = {"T": "tbsp", "t": "tsp"}
_IGNORED = re.compile(r"[\s-]+")

_logger = logging.getLogger(__name__)

_VOLUME = Dimension.VOLUME
_WEIGHT = Dimension.WEIGHT
_COUNT = Dimension.COUNT
_METRIC = MeasurementSystem.METRIC
_CUSTOMARY = MeasurementSystem.CUSTOMARY
_NONE = MeasurementSystem.NONE

UNITS_OF_MEASURE: tuple[UnitOfMeasure, ...] = (
    # Metric volume
    UnitOfMeasure("ml", "Milliliter", _VOLUME, _METRIC, 1004),
    UnitOfMeasure("cl", "Centiliter", _VOLUME, _METRIC),
    UnitOfMeasure("dl", "Deciliter", _VOLUME, _METRIC),
    UnitOfMeasure("l", "Liter", _VOLUME, _METRIC, 1003),
    # US customary volume
    UnitOfMeasure("tsp", "Teaspoon", _VOLUME, _CUSTOMARY, 1002),
    UnitOfMeasure("tbsp", "Tablespoon", _VOLUME, _CUSTOMARY, 1001),
    UnitOfMeasure("floz", "Fluid Ounce", _VOLUME, _CUSTOMARY, 1009),
    UnitOfMeasure("cup", "Cup", _VOLUME, _CUSTOMARY, 1000),
    UnitOfMeasure("pint", "Pint", _VOLUME, _CUSTOMARY, 1008),
    UnitOfMeasure("quart", "Quart", _VOLUME, _CUSTOMARY, 1045),
    UnitOfMeasure("gallon", "Gallon", _VOLUME, _CUSTOMARY, 1007),
    # Metric weight
    UnitOfMeasure("mg", "Milligram", _WEIGHT, _METRIC),
    UnitOfMeasure("g", "Gram", _WEIGHT, _METRIC),
    UnitOfMeasure("kg", "Kilogram", _WEIGHT, _METRIC),
    # US customary weight
    UnitOfMeasure("oz", "Ounce", _WEIGHT, _CUSTOMARY, 1038),
    UnitOfMeasure("lb", "Pound", _WEIGHT, _CUSTOMARY, 1030),
    # Count
    UnitOfMeasure("piece", "Piece", _COUNT, _NONE),
    UnitOfMeasure(FALLBACK_UNIT_ID, "Item", _COUNT, _NONE, FALLBACK_EXTERNAL_ID),
    UnitOfMeasure("each", "Each", _COUNT, _NONE),
    UnitOfMeasure("pinch", "Pinch", _COUNT, _NONE),
    UnitOfMeasure("serving", "Serving", _COUNT, _NONE),
)

UNITS_BY_ID: Mapping[str, UnitOfMeasure] = MappingProxyType(
    {unit.id: unit for unit in UNITS_OF_MEASURE}
)
_UNITS_BY_EXTERNAL_ID: Mapping[int, UnitOfMeasure] = MappingProxyType(
    {unit.external_id: unit for unit in UNITS_OF_MEASURE if unit.external_id}
)
_UNITS_BY_TOKEN: Mapping[str, UnitOfMeasure] = MappingProxyType(
    {
        **{_IGNORED.sub("", unit.name.lower()): unit for unit in UNITS_OF_MEASURE},
        **{unit.id.lower(): unit for unit in UNITS_OF_MEASURE},
    }
)

FALLBACK_UNIT = UNITS_BY_ID[FALLBACK_UNIT_ID]


def get_unit(unit_id: str) -> UnitOfMeasure:
    """Return the unit registered under an exact id."""
    try:
        return UNITS_BY_ID[unit_id]
    except KeyError:
        raise UnknownUnitError(unit_id) from None


def find_by_token(token: str) -> UnitOfMeasure:
    """Match a unit name or abbreviation, falling back to the generic item.

    Matching ignores case, whitespace and hyphens. The bare tokens ``T`` and
    ``t`` are recipe shorthand for tablespoon and teaspoon.
    """
    stripped = token.strip()
    key = _SHORTHAND.get(stripped) or _IGNORED.sub("", stripped.lower())
    unit = _UNITS_BY_TOKEN.get(key)
    if unit is None:
        _logger.debug("Unrecognized unit token %r, using %s", token, FALLBACK_UNIT_ID)
        return FALLBACK_UNIT
    return unit


def find_by_external_id(external_id: int) -> UnitOfMeasure:
    """Match a FoodData Central measure unit id, falling back to the generic item."""
    unit = _UNITS_BY_EXTERNAL_ID.get(external_id)
    if unit is None:
        _logger.debug(
            "Unrecognized unit id %s, using %s", external_id, FALLBACK_UNIT_ID
        )
        return FALLBACK_UNIT
    return unit


def find_unit_of_measure(match: str | int) -> UnitOfMeasure:
    """Find a unit by text token or by external id; never fails."""
    if isinstance(match, str):
        return find_by_token(match)
    return find_by_external_id(match)


def units_for(dimension: Dimension) -> list[UnitOfMeasure]:
    """Return catalog units of one dimension, in catalog order."""
    return [unit for unit in UNITS_OF_MEASURE if unit.dimension is dimension]
