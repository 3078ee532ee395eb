"""
Pytest configuration and fixtures for tickerfolio tests.

This module provides:
- Factory helpers for transactions and price snapshots
- Service fixtures (aggregator, analysis, goals, CSV)
- Sample portfolios with known figures
- FastAPI test client and JSON payload helpers
"""

import itertools
import math
from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from tickerfolio.config.settings import reset_settings
from tickerfolio.core.timezone import UTC_TZ
from tickerfolio.csv import CsvImporter, CsvTemplateGenerator
from tickerfolio.domain.models import (
    PortfolioSnapshot,
    StockPriceInfo,
    Transaction,
    TransactionType,
)
from tickerfolio.main import app
from tickerfolio.services import AnalysisService, GoalPlanner, PortfolioAggregator


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(year: int, month: int, day: int, hour: int = 10, minute: int = 0) -> datetime:
    """Create a localized UTC datetime."""
    return UTC_TZ.localize(datetime(year, month, day, hour, minute))


# =============================================================================
# FACTORY HELPERS (exported for use in tests)
# =============================================================================


_txn_ids = itertools.count(1)


def make_transaction(
    symbol: str,
    txn_type: TransactionType,
    quantity: float,
    price: float,
    fee: float = 0.0,
    currency: str = "USD",
    current_price: Optional[float] = None,
    trade_date: Optional[datetime] = None,
) -> Transaction:
    """Helper to create a transaction with a unique id."""
    return Transaction(
        txn_id=f"txn-{next(_txn_ids)}",
        symbol=symbol,
        txn_type=txn_type,
        quantity=quantity,
        price=price,
        fee=fee,
        currency=currency,
        trade_date=trade_date or utc_datetime(2024, 1, 15),
        current_price=current_price,
    )


def make_buy(symbol: str, quantity: float, price: float, **kwargs) -> Transaction:
    """Helper to create a BUY transaction."""
    return make_transaction(symbol, TransactionType.BUY, quantity, price, **kwargs)


def make_sell(symbol: str, quantity: float, price: float, **kwargs) -> Transaction:
    """Helper to create a SELL transaction."""
    return make_transaction(symbol, TransactionType.SELL, quantity, price, **kwargs)


def make_price(
    symbol: str,
    price: float,
    tags: str = "",
    category: str = "",
    currency: str = "USD",
) -> StockPriceInfo:
    """Helper to create a price snapshot row."""
    return StockPriceInfo(
        symbol=symbol,
        price=price,
        tags=tags,
        category=category,
        currency=currency,
        updated_at=utc_datetime(2024, 6, 15, 16),
    )


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01) -> None:
    """Assert two floats are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def rects_overlap_area(a, b) -> float:
    """Intersection area of two treemap rectangles (0 when disjoint)."""
    dx = min(a.x + a.width, b.x + b.width) - max(a.x, b.x)
    dy = min(a.y + a.height, b.y + b.height) - max(a.y, b.y)
    return dx * dy if dx > 0 and dy > 0 else 0.0


def transaction_payload(
    symbol: str,
    txn_type: str,
    quantity: float,
    price: float,
    fee: float = 0.0,
    currency: str = "USD",
    txn_id: Optional[str] = None,
    **extra,
) -> dict:
    """JSON body fragment for one transaction."""
    return {
        "txn_id": txn_id or f"txn-{next(_txn_ids)}",
        "symbol": symbol,
        "txn_type": txn_type,
        "quantity": quantity,
        "price": price,
        "fee": fee,
        "currency": currency,
        "trade_date": "2024-01-15T10:00:00Z",
        **extra,
    }


def price_payload(
    symbol: str,
    price: float,
    tags: str = "",
    category: str = "",
    currency: str = "USD",
) -> dict:
    """JSON body fragment for one price snapshot row."""
    return {
        "symbol": symbol,
        "price": price,
        "tags": tags,
        "category": category,
        "currency": currency,
        "updated_at": "2024-06-15T16:00:00Z",
    }


def is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings():
    """Reload settings for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def exchange_rate() -> float:
    """Fixed USD -> BRL rate used across tests."""
    return 5.0


@pytest.fixture
def aggregator(exchange_rate) -> PortfolioAggregator:
    """Provide PortfolioAggregator with the fixed exchange rate."""
    return PortfolioAggregator(exchange_rate=exchange_rate)


@pytest.fixture
def goal_planner() -> GoalPlanner:
    """Provide GoalPlanner with the default tolerance."""
    return GoalPlanner()


@pytest.fixture
def analysis_service(goal_planner) -> AnalysisService:
    """Provide AnalysisService."""
    return AnalysisService(goal_planner=goal_planner)


@pytest.fixture
def csv_importer() -> CsvImporter:
    """Provide CsvImporter."""
    return CsvImporter()


@pytest.fixture
def csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator."""
    return CsvTemplateGenerator()


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def mixed_transactions() -> list[Transaction]:
    """
    Two USD tickers and one BRL ticker.

    AAPL: buy 10 @ 100, buy 5 @ 200, sell 5 @ 150 (fee 1) -> 10 held, avg 133.33
    MSFT: buy 4 @ 300 (fee 2)                              -> 4 held, avg 300
    PETR4: buy 100 @ 30 (BRL)                              -> 100 held, avg 30
    """
    return [
        make_buy("AAPL", 10, 100.0),
        make_buy("AAPL", 5, 200.0),
        make_sell("AAPL", 5, 150.0, fee=1.0),
        make_buy("MSFT", 4, 300.0, fee=2.0),
        make_buy("PETR4", 100, 30.0, currency="BRL"),
    ]


@pytest.fixture
def mixed_prices() -> list[StockPriceInfo]:
    """Price table for mixed_transactions."""
    return [
        make_price("AAPL", 150.0, tags="big-tech,us", category="Tech"),
        make_price("MSFT", 400.0, tags="big-tech", category="Tech"),
        make_price("PETR4", 40.0, tags="oil", category="Energy", currency="BRL"),
    ]


@pytest.fixture
def mixed_snapshot(mixed_transactions, mixed_prices, exchange_rate) -> PortfolioSnapshot:
    """Snapshot bundling the mixed portfolio."""
    return PortfolioSnapshot(
        transactions=tuple(mixed_transactions),
        prices=tuple(mixed_prices),
        exchange_rate=exchange_rate,
    )


@pytest.fixture
def mixed_payload() -> dict:
    """JSON request body equivalent to mixed_snapshot."""
    return {
        "transactions": [
            transaction_payload("AAPL", "BUY", 10, 100.0),
            transaction_payload("AAPL", "BUY", 5, 200.0),
            transaction_payload("AAPL", "SELL", 5, 150.0, fee=1.0),
            transaction_payload("MSFT", "BUY", 4, 300.0, fee=2.0),
            transaction_payload("PETR4", "BUY", 100, 30.0, currency="BRL"),
        ],
        "prices": [
            price_payload("AAPL", 150.0, tags="big-tech,us", category="Tech"),
            price_payload("MSFT", 400.0, tags="big-tech", category="Tech"),
            price_payload("PETR4", 40.0, tags="oil", category="Energy", currency="BRL"),
        ],
        "exchange_rate": 5.0,
    }


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """Provide FastAPI test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_csv_content() -> str:
    """Sample spreadsheet export with a header and three purchases."""
    return """Date,Quantity,Price,Fee
2024-01-15,10,185.50,0
2024-02-01,5,190.00,4.95
2024-03-10,2.5,175.25,1
"""


@pytest.fixture
def invalid_csv_content() -> str:
    """Sample spreadsheet export with one good row and several bad ones."""
    return """Date,Quantity,Price,Fee
2024-01-15,10,185.50,0
15/01/2024,10,185.50,0
2024-01-16,-3,185.50,0
2024-01-17,3,abc,0
2024-01-18,3,185.50,-1
2024-01-19,3
"""
