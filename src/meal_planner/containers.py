"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_planner.app_logging import configure_logging
from meal_planner.config import Settings, parse_excluded_portion_units
from meal_planner.services.fdc_import import FdcImportService
from meal_planner.services.goals import GoalService
from meal_planner.services.meals import MealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    goal_service: GoalService
    fdc_import_service: FdcImportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    meal_service = MealService(debug=resolved_settings.debug)
    goal_service = GoalService(
        goals=resolved_settings.nutrition_goals(),
        meal_service=meal_service,
    )
    fdc_import_service = FdcImportService(
        excluded_portion_units=parse_excluded_portion_units(
            resolved_settings.fdc_excluded_portion_units
        ),
        portion_precision=resolved_settings.fdc_portion_precision,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        meal_service=meal_service,
        goal_service=goal_service,
        fdc_import_service=fdc_import_service,
    )
