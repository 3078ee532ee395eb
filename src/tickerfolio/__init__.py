"""Portfolio aggregation and treemap layout for a personal stock tracker."""

__version__ = "0.1.0"
