"""Portfolio endpoints: open positions, buys and sells."""

from typing import Optional

from fastapi import APIRouter, Depends

from psx_spotter.api.deps import get_ledger_engine
from psx_spotter.api.schemas import (
    BuyRequest,
    SellRequest,
    PositionResponse,
    PortfolioResponse,
    BuyResponse,
    SellResponse,
)
from psx_spotter.domain.models import Position
from psx_spotter.services import LedgerEngine

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def _to_response(positions: list[Position]) -> list[PositionResponse]:
    return [
        PositionResponse(
            symbol=p.symbol,
            quantity=float(p.quantity),
            average_price=float(p.average_price),
        )
        for p in positions
    ]


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    ledger: LedgerEngine = Depends(get_ledger_engine),
) -> PortfolioResponse:
    """List open positions."""
    return PortfolioResponse(portfolio=_to_response(ledger.list_positions()))


@router.post("", response_model=BuyResponse)
def buy(
    data: BuyRequest,
    ledger: LedgerEngine = Depends(get_ledger_engine),
) -> BuyResponse:
    """Buy shares; blends the price into the position's average cost."""
    positions = ledger.apply_buy(data.symbol, data.quantity, data.price)
    return BuyResponse(portfolio=_to_response(positions))


@router.post("/rebuild", response_model=BuyResponse)
def rebuild(
    ledger: LedgerEngine = Depends(get_ledger_engine),
) -> BuyResponse:
    """Rederive positions by replaying the trade log."""
    return BuyResponse(portfolio=_to_response(ledger.rebuild_positions()))


@router.delete("/{symbol}", response_model=SellResponse)
def sell(
    symbol: str,
    data: Optional[SellRequest] = None,
    ledger: LedgerEngine = Depends(get_ledger_engine),
) -> SellResponse:
    """
    Sell a position at sellPrice.

    The whole position is sold unless a quantity is given.
    """
    data = data or SellRequest()
    sale = ledger.apply_sell(symbol, data.sell_price, quantity=data.quantity)
    return SellResponse(
        message=f"Sold {sale.symbol}",
        symbol=sale.symbol,
        quantity=float(sale.quantity),
        price=float(sale.price),
        proceeds=float(sale.proceeds),
        new_balance=float(sale.proceeds),
    )
