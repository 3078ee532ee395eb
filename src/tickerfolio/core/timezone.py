"""Timezone utilities. Trade dates are compared as UTC instants."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC_TZ = pytz.utc


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Assume naive datetime is already UTC
        return UTC_TZ.localize(dt)
    return dt.astimezone(UTC_TZ)


def parse_datetime_utc(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse an ISO-8601 (or similar) datetime string and return it in UTC.

    If no timezone is provided in the string, assumes default_tz (UTC when omitted).
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        tz = default_tz or UTC_TZ
        dt = tz.localize(dt)
    return to_utc(dt)


def parse_trade_date(value: str) -> datetime:
    """Parse a strict YYYY-MM-DD spreadsheet date into a UTC midnight datetime."""
    dt = datetime.strptime(value.strip(), "%Y-%m-%d")
    return UTC_TZ.localize(dt)
