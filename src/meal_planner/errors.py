"""Error types raised by the meal planner core."""


class MealPlannerError(Exception):
    """Base class for meal planner errors."""


class InvalidConversionError(MealPlannerError, ValueError):
    """Raised when two units of measure cannot be converted into each other."""

    def __init__(self, from_unit_id: str, to_unit_id: str) -> None:
        super().__init__(f"Invalid conversion: {from_unit_id} -> {to_unit_id}")
        self.from_unit_id = from_unit_id
        self.to_unit_id = to_unit_id


class UnknownUnitError(MealPlannerError, KeyError):
    """Raised by strict catalog lookups for an unregistered unit id."""


class FdcPayloadError(MealPlannerError):
    """Raised when a FoodData Central payload cannot be imported."""
