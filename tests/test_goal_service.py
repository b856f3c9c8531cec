"""Tests for goal service."""

from datetime import date

import pytest

from meal_planner.domain.goals import NutritionGoals
from meal_planner.domain.meals import Meal, MealPlan, MealType
from meal_planner.domain.nutrition import Nutrition
from meal_planner.services.goals import GoalService, week_start
from meal_planner.services.meals import MealService
from tests.conftest import make_item

GOALS = NutritionGoals(
    calories=2000,
    sugar=30,
    protein=100,
    tolerance=10,
    cheat_days=1,
    week_start_day=1,
)


def _plan(day: date, calories: float, protein: float) -> MealPlan:
    return MealPlan(
        date=day,
        meals=(
            Meal(
                name="Day",
                type=MealType.DINNER,
                items=(make_item("Food", calories, protein),),
            ),
        ),
    )


def test_assess_day_within_tolerance() -> None:
    service = GoalService(GOALS, MealService())

    assessment = service.assess_day(Nutrition(2150, 92, 60, 250, 32, 2000))

    assert assessment.calories_on_target
    assert assessment.protein_on_target
    assert assessment.sugar_on_target
    assert not assessment.is_cheat_day


def test_assess_day_outside_tolerance() -> None:
    service = GoalService(GOALS, MealService())

    assessment = service.assess_day(Nutrition(2300, 80, 60, 250, 40, 2000))

    assert not assessment.calories_on_target
    assert not assessment.protein_on_target
    assert not assessment.sugar_on_target
    assert assessment.is_cheat_day


def test_week_start_honors_configured_day() -> None:
    wednesday = date(2024, 5, 8)

    assert week_start(wednesday, 1) == date(2024, 5, 6)
    assert week_start(wednesday, 0) == date(2024, 5, 5)
    assert week_start(date(2024, 5, 5), 1) == date(2024, 4, 29)
    assert week_start(date(2024, 5, 6), 1) == date(2024, 5, 6)


def test_assess_weeks_counts_cheat_days() -> None:
    service = GoalService(GOALS, MealService())
    plans = [
        _plan(date(2024, 5, 14), 3000, 100),
        _plan(date(2024, 5, 6), 2000, 100),
        _plan(date(2024, 5, 7), 3000, 100),
        _plan(date(2024, 5, 8), 1000, 100),
    ]

    weeks = service.assess_weeks(plans)

    assert [week.week_start for week in weeks] == [date(2024, 5, 6), date(2024, 5, 13)]
    assert weeks[0].cheat_days_used == 2
    assert not weeks[0].within_allowance
    assert weeks[1].cheat_days_used == 1
    assert weeks[1].within_allowance


def test_goals_validate_ranges() -> None:
    with pytest.raises(ValueError):
        NutritionGoals(2000, 30, 100, tolerance=120, cheat_days=1, week_start_day=1)
    with pytest.raises(ValueError):
        NutritionGoals(2000, 30, 100, tolerance=10, cheat_days=1, week_start_day=7)
