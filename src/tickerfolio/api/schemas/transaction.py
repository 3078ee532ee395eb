"""Pydantic schemas for transaction import endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ImportedTransaction(BaseModel):
    txn_id: str
    symbol: str
    txn_type: str
    quantity: float
    price: float
    fee: float
    currency: str
    trade_date: Optional[datetime] = None


class ImportRowErrorResponse(BaseModel):
    model_config = {"from_attributes": True}

    row: int
    message: str


class ImportSummaryResponse(BaseModel):
    """Response schema for spreadsheet import results."""

    imported: int
    failed: int
    transactions: list[ImportedTransaction]
    errors: list[ImportRowErrorResponse]
    import_batch_id: Optional[str] = None
