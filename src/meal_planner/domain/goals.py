"""Domain models for nutritional goals."""

from dataclasses import dataclass
from datetime import date

MAX_TOLERANCE = 100
SATURDAY = 6


@dataclass(frozen=True)
class NutritionGoals:
    """Daily targets and the weekly cheat-day allowance.

    ``week_start_day`` counts from Sunday (0) to Saturday (6).
    """

    calories: float
    sugar: float
    protein: float
    tolerance: float
    cheat_days: int
    week_start_day: int

    def __post_init__(self) -> None:
        if not 0 <= self.tolerance <= MAX_TOLERANCE:
            raise ValueError("Tolerance must be between 0 and 100")
        if not 0 <= self.week_start_day <= SATURDAY:
            raise ValueError("Week start day must be between 0 and 6")
        if self.cheat_days < 0:
            raise ValueError("Cheat days must not be negative")


@dataclass(frozen=True)
class DayAssessment:
    """How a day's nutrition compares to the goals."""

    day: date | None
    calories_on_target: bool
    protein_on_target: bool
    sugar_on_target: bool

    @property
    def is_cheat_day(self) -> bool:
        """A day that misses any target counts as a cheat day."""
        return not (
            self.calories_on_target and self.protein_on_target and self.sugar_on_target
        )


@dataclass(frozen=True)
class WeekAssessment:
    """Cheat days used in one week against the allowance."""

    week_start: date
    days: list[DayAssessment]
    cheat_days_allowed: int

    @property
    def cheat_days_used(self) -> int:
        return sum(1 for day in self.days if day.is_cheat_day)

    @property
    def within_allowance(self) -> bool:
        return self.cheat_days_used <= self.cheat_days_allowed
