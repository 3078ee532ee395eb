"""Spreadsheet (CSV) import of BUY transactions for a single symbol."""

import csv
import io
import logging
import math
import uuid
from typing import Optional, Union

from tickerfolio.core.exceptions import ValidationError
from tickerfolio.core.timezone import parse_trade_date
from tickerfolio.domain.models import Currency, Transaction, TransactionType
from tickerfolio.domain.views import ImportRowError, ImportSummary

logger = logging.getLogger(__name__)

# Column order expected in every data row (first row is a header)
CSV_COLUMNS = ["Date", "Quantity", "Price", "Fee"]

MAX_IMPORT_ROWS = 10_000


class CsvImporter:
    """
    Parses a spreadsheet of purchases into BUY transactions.

    Expected format: Date (YYYY-MM-DD), Quantity, Price, Fee.
    The first row is always treated as a header and skipped.
    Best-effort: good rows are returned even when other rows fail.
    """

    def parse(
        self,
        content: Union[bytes, str],
        symbol: str,
        currency: Optional[str] = None,
    ) -> ImportSummary:
        """
        Parse CSV content into transactions for one symbol.

        Raises:
            ValidationError: symbol is blank or the file has too many rows.
        """
        symbol = (symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Symbol is required")
        currency = (currency or "").strip().upper() or Currency.USD.value

        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError:
                raise ValidationError("Invalid CSV file: expected UTF-8 text")

        summary = ImportSummary(
            symbol=symbol,
            currency=currency,
            import_batch_id=str(uuid.uuid4()),
        )

        rows = list(csv.reader(io.StringIO(content)))
        if len(rows) - 1 > MAX_IMPORT_ROWS:
            raise ValidationError(f"Too many rows: maximum is {MAX_IMPORT_ROWS}")

        for row_num, row in enumerate(rows, start=1):
            if row_num == 1:
                continue
            if not any(cell.strip() for cell in row):
                continue
            try:
                summary.transactions.append(self._parse_row(row, symbol, currency))
            except ValidationError as exc:
                summary.errors.append(ImportRowError(row=row_num, message=exc.message))

        logger.info(
            "CSV import for %s: %d imported, %d failed",
            symbol,
            summary.imported_count,
            summary.error_count,
        )
        return summary

    def _parse_row(self, row: list[str], symbol: str, currency: str) -> Transaction:
        """Convert one data row into a BUY transaction."""
        if len(row) < len(CSV_COLUMNS):
            raise ValidationError(
                f"Expected {len(CSV_COLUMNS)} columns (Date, Quantity, Price, Fee), got {len(row)}"
            )

        raw_date, raw_qty, raw_price, raw_fee = (cell.strip() for cell in row[:4])

        try:
            trade_date = parse_trade_date(raw_date)
        except ValueError:
            raise ValidationError(f"Invalid date '{raw_date}'. Expected format: YYYY-MM-DD")

        quantity = self._parse_float(raw_qty)
        if quantity is None or quantity <= 0:
            raise ValidationError(f"Invalid quantity '{raw_qty}'. Must be a positive number")

        price = self._parse_float(raw_price)
        if price is None or price <= 0:
            raise ValidationError(f"Invalid price '{raw_price}'. Must be a positive number")

        fee = self._parse_float(raw_fee)
        if fee is None or fee < 0:
            raise ValidationError(f"Invalid fee '{raw_fee}'. Must be a non-negative number")

        return Transaction(
            txn_id=str(uuid.uuid4()),
            symbol=symbol,
            txn_type=TransactionType.BUY,
            quantity=quantity,
            price=price,
            fee=fee,
            currency=currency,
            trade_date=trade_date,
        )

    @staticmethod
    def _parse_float(value: str) -> Optional[float]:
        """Parse a finite float, returning None for empty or invalid input."""
        if not value:
            return None
        try:
            parsed = float(value)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
