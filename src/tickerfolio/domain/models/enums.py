"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    BUY = "BUY"
    SELL = "SELL"


class Currency(str, Enum):
    """Currencies the portfolio can hold. BRL is the reporting currency."""

    USD = "USD"
    BRL = "BRL"
