"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tickerfolio.domain.models import TransactionType


class TickerResponse(BaseModel):
    """Per-symbol holding with its weight and dashboard tile span."""

    model_config = {"from_attributes": True}

    symbol: str
    net_quantity: float
    avg_buy_price: float
    current_price: float
    total_value: float
    cost_basis: float
    total_fees: float
    pnl: float
    pnl_percent: float
    tags: list[str]
    category: str
    currency: str
    weight_pct: float = 0.0
    tile_span: int = 2


class TickersResponse(BaseModel):
    tickers: list[TickerResponse]
    count: int


class TotalsResponse(BaseModel):
    """Totals per currency plus BRL grand totals."""

    total_usd: float
    total_brl: float
    pnl_usd: float
    pnl_brl: float
    exchange_rate: float
    grand_total: float
    grand_pnl: float


class PieSliceResponse(BaseModel):
    model_config = {"from_attributes": True}

    name: str
    value: float


class SummaryResponse(BaseModel):
    """Portfolio summary: totals plus asset and category distributions."""

    totals: TotalsResponse
    asset_slices: list[PieSliceResponse]
    category_slices: list[PieSliceResponse]
    weights: dict[str, float]


class TransactionViewResponse(BaseModel):
    """A transaction with its computed market fields."""

    txn_id: str
    symbol: str
    txn_type: TransactionType
    quantity: float
    price: float
    fee: float
    currency: str
    trade_date: Optional[datetime] = None
    note: Optional[str] = None
    current_price: float
    market_value: float
    pnl: float
    pnl_percent: float


class TransactionViewListResponse(BaseModel):
    transactions: list[TransactionViewResponse]
    count: int
