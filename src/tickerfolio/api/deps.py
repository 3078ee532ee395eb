"""Dependency injection for FastAPI."""

from fastapi import Depends

from tickerfolio.config.settings import Settings, get_settings
from tickerfolio.csv import CsvImporter, CsvTemplateGenerator
from tickerfolio.services import AnalysisService, GoalPlanner


def get_goal_planner(settings: Settings = Depends(get_settings)) -> GoalPlanner:
    """Provide GoalPlanner instance."""
    return GoalPlanner(tolerance_percent=settings.goal_tolerance_percent)


def get_analysis_service(
    settings: Settings = Depends(get_settings),
    goal_planner: GoalPlanner = Depends(get_goal_planner),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    return AnalysisService(
        default_currency=settings.default_currency,
        default_category=settings.default_category,
        goal_planner=goal_planner,
    )


def get_csv_importer() -> CsvImporter:
    """Provide CsvImporter instance."""
    return CsvImporter()


def get_csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator instance."""
    return CsvTemplateGenerator()
