"""Core utilities and shared functionality."""

from tickerfolio.core.timezone import (
    to_utc,
    parse_datetime_utc,
    parse_trade_date,
    UTC_TZ,
)
from tickerfolio.core.exceptions import (
    AppError,
    ValidationError,
)
from tickerfolio.core.numbers import safe_ratio, is_number

__all__ = [
    "to_utc",
    "parse_datetime_utc",
    "parse_trade_date",
    "UTC_TZ",
    "AppError",
    "ValidationError",
    "safe_ratio",
    "is_number",
]
