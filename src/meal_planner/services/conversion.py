"""Conversion factors between units of measure of the same dimension.

Every factor returned here converts amounts: ``amount_in_target =
amount_in_source * convert_units(source, target)``.
"""

from dataclasses import dataclass

from meal_planner.domain.nutrition import Quantity
from meal_planner.domain.units import Dimension, MeasurementSystem, UnitOfMeasure
from meal_planner.errors import InvalidConversionError

ML_PER_FLUID_OUNCE = 29.5735
GRAMS_PER_OUNCE = 28.3495


@dataclass(frozen=True)
class _Step:
    unit_id: str
    factor_to_next: float


@dataclass(frozen=True)
class _Bridge:
    metric_unit_id: str
    customary_unit_id: str
    metric_per_customary: float


_METRIC = MeasurementSystem.METRIC
_CUSTOMARY = MeasurementSystem.CUSTOMARY

# Smallest unit first; factor_to_next is how many of this unit make the next one.
_CONVERSION_TABLES: dict[tuple[Dimension, MeasurementSystem], tuple[_Step, ...]] = {
    (Dimension.WEIGHT, _METRIC): (
        _Step("mg", 1000),
        _Step("g", 1000),
        _Step("kg", 1),
    ),
    (Dimension.WEIGHT, _CUSTOMARY): (
        _Step("oz", 16),
        _Step("lb", 1),
    ),
    (Dimension.VOLUME, _METRIC): (
        _Step("ml", 10),
        _Step("cl", 10),
        _Step("dl", 10),
        _Step("l", 1),
    ),
    (Dimension.VOLUME, _CUSTOMARY): (
        _Step("tsp", 3),
        _Step("tbsp", 2),
        _Step("floz", 8),
        _Step("cup", 2),
        _Step("pint", 2),
        _Step("quart", 4),
        _Step("gallon", 1),
    ),
}

_BRIDGES: dict[Dimension, _Bridge] = {
    Dimension.WEIGHT: _Bridge("g", "oz", GRAMS_PER_OUNCE),
    Dimension.VOLUME: _Bridge("ml", "floz", ML_PER_FLUID_OUNCE),
}


def convert_units(from_unit: UnitOfMeasure, to_unit: UnitOfMeasure) -> float:
    """Return the factor converting an amount in from_unit to to_unit.

    Raises InvalidConversionError when the dimensions differ or when two
    different count units are given.
    """
    if from_unit.id == to_unit.id:
        return 1.0
    dimension = from_unit.dimension
    if dimension is Dimension.COUNT or dimension is not to_unit.dimension:
        raise InvalidConversionError(from_unit.id, to_unit.id)
    if from_unit.system is to_unit.system:
        return _table_factor(dimension, from_unit.system, from_unit.id, to_unit.id)
    return _bridged_factor(from_unit, to_unit)


def convert_quantity(source: Quantity, target: Quantity) -> float:
    """Return the multiplier turning source's nutrients into target's nutrients.

    This is the size of ``target`` expressed in ``source`` units, divided by
    the source amount.
    """
    if source.amount <= 0:
        raise ValueError("Source amount must be positive")
    return convert_units(target.unit, source.unit) * target.amount / source.amount


def convert_amount(quantity: Quantity, to_unit: UnitOfMeasure) -> Quantity:
    """Express a quantity in another unit of the same dimension."""
    return Quantity(
        amount=quantity.amount * convert_units(quantity.unit, to_unit),
        unit=to_unit,
    )


def _bridged_factor(from_unit: UnitOfMeasure, to_unit: UnitOfMeasure) -> float:
    dimension = from_unit.dimension
    bridge = _BRIDGES[dimension]
    metric_id = bridge.metric_unit_id
    customary_id = bridge.customary_unit_id
    if from_unit.system is _METRIC:
        to_bridge = _table_factor(dimension, _METRIC, from_unit.id, metric_id)
        from_bridge = _table_factor(dimension, _CUSTOMARY, customary_id, to_unit.id)
        return to_bridge / bridge.metric_per_customary * from_bridge
    to_bridge = _table_factor(dimension, _CUSTOMARY, from_unit.id, customary_id)
    from_bridge = _table_factor(dimension, _METRIC, metric_id, to_unit.id)
    return to_bridge * bridge.metric_per_customary * from_bridge


def _table_factor(
    dimension: Dimension, system: MeasurementSystem, from_id: str, to_id: str
) -> float:
    table = _CONVERSION_TABLES[(dimension, system)]
    ids = [step.unit_id for step in table]
    if from_id not in ids or to_id not in ids:
        raise InvalidConversionError(from_id, to_id)
    from_idx = ids.index(from_id)
    to_idx = ids.index(to_id)
    start, end = sorted((from_idx, to_idx))
    factor = 1.0
    for step in table[start:end]:
        factor *= step.factor_to_next
    # Going up the table yields fewer of the larger unit.
    return 1 / factor if from_idx < to_idx else factor
