"""Trade history endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from psx_spotter.api.deps import get_ledger_engine
from psx_spotter.api.schemas import TradeResponse, TradeListResponse
from psx_spotter.services import LedgerEngine

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.get("", response_model=TradeListResponse)
def list_trades(
    symbol: Optional[str] = Query(None, description="Exact symbol (case-insensitive)"),
    trade_type: Optional[str] = Query(None, alias="type", description="Buy or Sell"),
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper bound"),
    ledger: LedgerEngine = Depends(get_ledger_engine),
) -> TradeListResponse:
    """List trades in the order they were made, filtered by the given params."""
    trades = ledger.query_trades(
        symbol=symbol,
        trade_type=trade_type,
        date_from=date_from,
        date_to=date_to,
    )
    return TradeListResponse(
        trades=[
            TradeResponse(
                trade_id=t.trade_id,
                type=t.trade_type,
                symbol=t.symbol,
                quantity=float(t.quantity),
                price=float(t.price),
                proceeds=float(t.proceeds) if t.proceeds is not None else None,
                timestamp=t.timestamp,
            )
            for t in trades
        ]
    )
