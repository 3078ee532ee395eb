"""Pydantic schemas for the portfolio snapshot sent with every request."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from tickerfolio.core.timezone import parse_datetime_utc, to_utc
from tickerfolio.domain.models import (
    PortfolioSnapshot,
    StockPriceInfo,
    Transaction,
    TransactionType,
)


def _coerce_datetime(value: Any) -> Any:
    """Accept any ISO-8601 string and normalize it to an aware UTC datetime."""
    if isinstance(value, str):
        return parse_datetime_utc(value) if value.strip() else None
    if isinstance(value, datetime):
        return to_utc(value)
    return value


class TransactionIn(BaseModel):
    """A transaction as returned by the transaction store."""

    txn_id: str = Field(..., description="Transaction ID")
    symbol: str = Field(..., min_length=1, max_length=20)
    txn_type: TransactionType = Field(..., description="BUY or SELL")
    quantity: float = Field(..., description="Units traded")
    price: float = Field(..., description="Price per unit at trade time")
    fee: float = Field(default=0.0, description="Transaction fee")
    currency: str = Field(default="", max_length=3)
    trade_date: Optional[datetime] = Field(default=None, description="ISO-8601 trade time")
    note: Optional[str] = Field(default=None, max_length=500)
    current_price: Optional[float] = Field(
        default=None,
        description="Backend price hint, used only when the symbol has no price entry",
    )

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("txn_type", mode="before")
    @classmethod
    def uppercase_type(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("trade_date", mode="before")
    @classmethod
    def parse_trade_date(cls, v: Any) -> Any:
        return _coerce_datetime(v)

    def to_domain(self) -> Transaction:
        return Transaction(
            txn_id=self.txn_id,
            symbol=self.symbol,
            txn_type=self.txn_type,
            quantity=self.quantity,
            price=self.price,
            fee=self.fee,
            currency=self.currency,
            trade_date=self.trade_date,
            note=self.note,
            current_price=self.current_price,
        )


class StockPriceIn(BaseModel):
    """A price snapshot row."""

    symbol: str = Field(..., min_length=1, max_length=20)
    price: float = 0.0
    tags: str = ""
    category: str = ""
    currency: str = Field(default="", max_length=3)
    updated_at: Optional[datetime] = None

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("updated_at", mode="before")
    @classmethod
    def parse_updated_at(cls, v: Any) -> Any:
        return _coerce_datetime(v)

    def to_domain(self) -> StockPriceInfo:
        return StockPriceInfo(
            symbol=self.symbol,
            price=self.price,
            tags=self.tags,
            category=self.category,
            currency=self.currency,
            updated_at=self.updated_at,
        )


class SnapshotRequest(BaseModel):
    """Transactions, prices and exchange rate for one aggregation pass."""

    transactions: list[TransactionIn] = Field(default_factory=list)
    prices: list[StockPriceIn] = Field(default_factory=list)
    exchange_rate: Optional[float] = Field(
        default=None,
        gt=0,
        description="USD -> BRL rate; server default when omitted",
    )

    def to_snapshot(self, default_exchange_rate: float) -> PortfolioSnapshot:
        return PortfolioSnapshot(
            transactions=tuple(t.to_domain() for t in self.transactions),
            prices=tuple(p.to_domain() for p in self.prices),
            exchange_rate=self.exchange_rate or default_exchange_rate,
        )
