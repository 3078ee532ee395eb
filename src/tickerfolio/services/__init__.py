"""Service layer - aggregation, layout and goal tracking."""

from tickerfolio.services.price_book import PriceBook
from tickerfolio.services.portfolio_aggregator import PortfolioAggregator
from tickerfolio.services.treemap import squarify, worst_aspect_ratio
from tickerfolio.services.goal_planner import GoalPlanner
from tickerfolio.services.analysis_service import AnalysisService, tile_span

__all__ = [
    "PriceBook",
    "PortfolioAggregator",
    "squarify",
    "worst_aspect_ratio",
    "GoalPlanner",
    "AnalysisService",
    "tile_span",
]
