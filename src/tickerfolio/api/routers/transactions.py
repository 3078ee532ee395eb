"""Transaction spreadsheet import endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse, Response

from tickerfolio.api.deps import get_csv_importer, get_csv_template_generator
from tickerfolio.api.schemas import (
    ImportedTransaction,
    ImportRowErrorResponse,
    ImportSummaryResponse,
)
from tickerfolio.csv import CsvImporter, CsvTemplateGenerator

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/import", response_model=ImportSummaryResponse)
def import_transactions(
    file: UploadFile = File(...),
    symbol: str = Query(..., description="Symbol every row belongs to"),
    currency: Optional[str] = Query(None, description="Currency code (USD when omitted)"),
    importer: CsvImporter = Depends(get_csv_importer),
):
    """Parse a CSV of purchases (Date, Quantity, Price, Fee) into BUY transactions.

    Best-effort: valid rows are returned even when some rows fail. Responds
    400 when no row could be imported but some failed.
    """
    raw = file.file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")

    summary = importer.parse(raw, symbol=symbol, currency=currency)
    body = ImportSummaryResponse(
        imported=summary.imported_count,
        failed=summary.error_count,
        transactions=[
            ImportedTransaction(
                txn_id=t.txn_id,
                symbol=t.symbol,
                txn_type=t.txn_type.value,
                quantity=t.quantity,
                price=t.price,
                fee=t.fee,
                currency=t.currency,
                trade_date=t.trade_date,
            )
            for t in summary.transactions
        ],
        errors=[ImportRowErrorResponse.model_validate(e) for e in summary.errors],
        import_batch_id=summary.import_batch_id,
    )

    status_code = 400 if summary.imported_count == 0 and summary.error_count > 0 else 200
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.get("/template")
def download_template(
    generator: CsvTemplateGenerator = Depends(get_csv_template_generator),
):
    """Download a template CSV with header and example rows."""
    return Response(
        content=generator.render(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions_template.csv"'},
    )
