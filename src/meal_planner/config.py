"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_planner.domain.goals import NutritionGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    debug: bool = False
    goal_calories: float = 2500
    goal_sugar: float = 35
    goal_protein: float = 85
    goal_tolerance: float = 15
    goal_cheat_days: int = 2
    week_start_day: int = 1
    fdc_excluded_portion_units: str | None = "RACC"
    fdc_portion_precision: int = 2

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def nutrition_goals(self) -> NutritionGoals:
        """Return the default nutrition goals."""
        return NutritionGoals(
            calories=self.goal_calories,
            sugar=self.goal_sugar,
            protein=self.goal_protein,
            tolerance=self.goal_tolerance,
            cheat_days=self.goal_cheat_days,
            week_start_day=self.week_start_day,
        )


def parse_excluded_portion_units(raw: str | None) -> frozenset[str]:
    """Parse FDC portion unit abbreviations to skip on import."""
    if raw is None:
        return frozenset()
    return frozenset(chunk.strip() for chunk in raw.split(",") if chunk.strip())
