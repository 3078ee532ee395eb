"""Latest known market price for a symbol."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


def parse_tags(tags: Optional[str]) -> list[str]:
    """Split a comma-joined tag string, dropping empty tokens."""
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


@dataclass(frozen=True)
class StockPriceInfo:
    """
    Price snapshot row, refreshed wholesale by the external price sync.

    tags is stored comma-joined, exactly as the backend returns it.
    """

    symbol: str
    price: float
    tags: str = ""
    category: str = ""
    currency: str = ""
    updated_at: Optional[datetime] = field(default=None)

    @property
    def tag_list(self) -> list[str]:
        return parse_tags(self.tags)
