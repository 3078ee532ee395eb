"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tickerfolio.domain.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """
    A single BUY or SELL trade, as fetched from the transaction store.

    - quantity and price are per-unit amounts at trade time
    - currency is a free-form code ("USD", "BRL"); empty means unknown
    - current_price is an optional hint attached by the backend
    """

    txn_id: str
    symbol: str
    txn_type: TransactionType
    quantity: float
    price: float
    fee: float = 0.0
    currency: str = ""
    trade_date: Optional[datetime] = field(default=None)
    note: Optional[str] = None
    current_price: Optional[float] = None

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str) and not isinstance(self.txn_type, TransactionType):
            object.__setattr__(self, "txn_type", TransactionType(self.txn_type.upper()))

    @property
    def is_buy(self) -> bool:
        """Return True if this is a BUY transaction."""
        return self.txn_type == TransactionType.BUY

    @property
    def gross_amount(self) -> float:
        """quantity x price, ignoring fees."""
        return self.quantity * self.price
