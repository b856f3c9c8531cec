"""Assessment of planned nutrition against the user's goals."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from meal_planner.domain.goals import DayAssessment, NutritionGoals, WeekAssessment
from meal_planner.domain.meals import MealPlan
from meal_planner.domain.nutrition import Nutrition
from meal_planner.services.meals import MealService

DAYS_PER_WEEK = 7


@dataclass
class GoalService:
    """Service for comparing daily and weekly totals with nutrition goals."""

    goals: NutritionGoals
    meal_service: MealService

    def assess_day(
        self, nutrition: Nutrition, day: date | None = None
    ) -> DayAssessment:
        """Compare one day's nutrition with the daily targets."""
        tolerance = self.goals.tolerance / 100
        calorie_margin = self.goals.calories * tolerance
        return DayAssessment(
            day=day,
            calories_on_target=abs(nutrition.calories - self.goals.calories)
            <= calorie_margin,
            protein_on_target=nutrition.protein >= self.goals.protein * (1 - tolerance),
            sugar_on_target=nutrition.sugar <= self.goals.sugar * (1 + tolerance),
        )

    def assess_plan(self, plan: MealPlan) -> DayAssessment:
        """Assess the totals of a single day's plan."""
        return self.assess_day(self.meal_service.daily_plan_nutrients(plan), plan.date)

    def assess_weeks(self, plans: Iterable[MealPlan]) -> list[WeekAssessment]:
        """Group plans into weeks and count cheat days in each."""
        weeks: dict[date, list[DayAssessment]] = {}
        for plan in sorted(plans, key=lambda p: p.date):
            start = week_start(plan.date, self.goals.week_start_day)
            weeks.setdefault(start, []).append(self.assess_plan(plan))
        return [
            WeekAssessment(
                week_start=start,
                days=days,
                cheat_days_allowed=self.goals.cheat_days,
            )
            for start, days in weeks.items()
        ]


def week_start(day: date, week_start_day: int) -> date:
    """Return the first day of the week containing day.

    week_start_day counts from Sunday (0); date.weekday() counts from Monday.
    """
    sunday_based = (day.weekday() + 1) % DAYS_PER_WEEK
    offset = (sunday_based - week_start_day) % DAYS_PER_WEEK
    return day - timedelta(days=offset)
