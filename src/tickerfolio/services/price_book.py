"""Lookup of the latest price snapshot per symbol."""

from typing import Iterable, Optional

from tickerfolio.domain.models import StockPriceInfo


class PriceBook:
    """
    Symbol -> StockPriceInfo index built from the price table.

    When a symbol appears more than once, the last entry processed wins.
    """

    def __init__(self, prices: Iterable[StockPriceInfo] = ()):
        self._entries: dict[str, StockPriceInfo] = {}
        for info in prices:
            self._entries[info.symbol] = info

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, symbol: str) -> Optional[StockPriceInfo]:
        return self._entries.get(symbol)

    def price(self, symbol: str) -> Optional[float]:
        """Table price for symbol, or None when the symbol has no entry."""
        info = self._entries.get(symbol)
        return info.price if info else None

    def tags(self, symbol: str) -> list[str]:
        info = self._entries.get(symbol)
        return info.tag_list if info else []

    def category(self, symbol: str) -> Optional[str]:
        """Trimmed category, or None when missing or blank."""
        info = self._entries.get(symbol)
        if info and info.category and info.category.strip():
            return info.category.strip()
        return None

    def currency(self, symbol: str) -> Optional[str]:
        """Upper-cased currency, or None when missing or blank."""
        info = self._entries.get(symbol)
        if info and info.currency and info.currency.strip():
            return info.currency.strip().upper()
        return None

    def categories(self) -> list[str]:
        """Distinct non-empty categories, sorted alphabetically."""
        return sorted({c for c in (self.category(s) for s in self._entries) if c})
