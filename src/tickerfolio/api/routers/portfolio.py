"""Portfolio aggregation endpoints."""

from fastapi import APIRouter, Depends

from tickerfolio.api.deps import get_analysis_service
from tickerfolio.api.schemas import (
    PieSliceResponse,
    SnapshotRequest,
    SummaryResponse,
    TickerResponse,
    TickersResponse,
    TotalsResponse,
    TransactionViewListResponse,
    TransactionViewResponse,
)
from tickerfolio.config.settings import Settings, get_settings
from tickerfolio.services import AnalysisService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.post("/tickers", response_model=TickersResponse)
def get_tickers(
    request: SnapshotRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> TickersResponse:
    """Per-symbol holdings, largest BRL value first."""
    snapshot = request.to_snapshot(settings.default_exchange_rate)
    rows = analysis.tickers_with_spans(snapshot)

    return TickersResponse(
        tickers=[
            TickerResponse(
                symbol=ticker.symbol,
                net_quantity=ticker.net_quantity,
                avg_buy_price=ticker.avg_buy_price,
                current_price=ticker.current_price,
                total_value=ticker.total_value,
                cost_basis=ticker.cost_basis,
                total_fees=ticker.total_fees,
                pnl=ticker.pnl,
                pnl_percent=ticker.pnl_percent,
                tags=ticker.tags,
                category=ticker.category,
                currency=ticker.currency,
                weight_pct=weight,
                tile_span=span,
            )
            for ticker, weight, span in rows
        ],
        count=len(rows),
    )


@router.post("/summary", response_model=SummaryResponse)
def get_summary(
    request: SnapshotRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> SummaryResponse:
    """Totals and pie-chart distributions for the snapshot."""
    summary = analysis.summary(request.to_snapshot(settings.default_exchange_rate))
    totals = summary.totals

    return SummaryResponse(
        totals=TotalsResponse(
            total_usd=totals.total_usd,
            total_brl=totals.total_brl,
            pnl_usd=totals.pnl_usd,
            pnl_brl=totals.pnl_brl,
            exchange_rate=totals.exchange_rate,
            grand_total=totals.grand_total,
            grand_pnl=totals.grand_pnl,
        ),
        asset_slices=[PieSliceResponse.model_validate(s) for s in summary.asset_slices],
        category_slices=[PieSliceResponse.model_validate(s) for s in summary.category_slices],
        weights=summary.weights,
    )


@router.post("/transactions", response_model=TransactionViewListResponse)
def get_transactions(
    request: SnapshotRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_settings),
) -> TransactionViewListResponse:
    """Each transaction with its own market value and P&L."""
    views = analysis.transactions(request.to_snapshot(settings.default_exchange_rate))

    return TransactionViewListResponse(
        transactions=[
            TransactionViewResponse(
                txn_id=v.transaction.txn_id,
                symbol=v.transaction.symbol,
                txn_type=v.transaction.txn_type,
                quantity=v.transaction.quantity,
                price=v.transaction.price,
                fee=v.transaction.fee,
                currency=v.transaction.currency,
                trade_date=v.transaction.trade_date,
                note=v.transaction.note,
                current_price=v.current_price,
                market_value=v.market_value,
                pnl=v.pnl,
                pnl_percent=v.pnl_percent,
            )
            for v in views
        ],
        count=len(views),
    )
