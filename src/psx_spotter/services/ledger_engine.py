"""Ledger engine: positions at weighted-average cost and the trade log."""

import logging
import uuid
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Union

from psx_spotter.core.timezone import now_utc, parse_datetime_utc, parse_end_bound_utc
from psx_spotter.core.exceptions import (
    ValidationError,
    NotFoundError,
    InsufficientSharesError,
)
from psx_spotter.domain.models import Position, Trade, TradeType
from psx_spotter.domain.views import SaleConfirmation
from psx_spotter.repositories.protocols import (
    PositionRepository,
    TradeRepository,
    UnitOfWork,
)

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

# Smallest amount the ledger tracks
AMOUNT_STEP = Decimal("0.00000001")


def replay_trades(trades: Iterable[Trade]) -> list[Position]:
    """
    Fold a trade log into the position set it implies.

    BUY blends into the weighted average; SELL reduces the quantity and
    drops the position once nothing is left. Returned ordered by symbol.
    """
    positions: dict[str, Position] = {}

    for trade in trades:
        current = positions.get(trade.symbol)
        if trade.is_buy:
            if current is None:
                positions[trade.symbol] = Position(
                    symbol=trade.symbol,
                    quantity=trade.quantity,
                    average_price=trade.price,
                )
            else:
                positions[trade.symbol] = current.blend(trade.quantity, trade.price)

        elif trade.is_sell:
            if current is None:
                logger.warning("Sell of %s with no open position in trade log", trade.symbol)
                continue
            remaining = current.quantity - trade.quantity
            if remaining > 0:
                positions[trade.symbol] = Position(
                    symbol=current.symbol,
                    quantity=remaining,
                    average_price=current.average_price,
                )
            else:
                del positions[trade.symbol]

    return [positions[symbol] for symbol in sorted(positions)]


class LedgerEngine:
    """
    Engine for the portfolio ledger.

    Positions are stored and updated in place on every buy/sell; the trade
    log is the source of truth and rebuild_positions() rederives positions
    from it. Each mutation writes the position and the trade in one unit of
    work, so a failed operation leaves neither behind.
    """

    def __init__(
        self,
        position_repo: PositionRepository,
        trade_repo: TradeRepository,
        unit_of_work: UnitOfWork,
    ):
        self._position_repo = position_repo
        self._trade_repo = trade_repo
        self._uow = unit_of_work

    def list_positions(self) -> list[Position]:
        """Get current holdings, ordered by symbol."""
        return self._position_repo.list_all()

    def apply_buy(self, symbol: Optional[str], quantity: Optional[Number], price: Optional[Number]) -> list[Position]:
        """
        Buy `quantity` shares of `symbol` at `price`.

        Opens the position on first buy; otherwise blends the price into the
        weighted average using the pre-update quantity and average.

        Returns:
            The full position set after the buy.
        """
        symbol = self._require_symbol(symbol)
        quantity = self._require_positive(quantity, "quantity")
        price = self._require_positive(price, "price")

        existing = self._position_repo.get(symbol)
        if existing is None:
            updated = Position(symbol=symbol, quantity=quantity, average_price=price)
        else:
            updated = existing.blend(quantity, price)

        trade = Trade(
            trade_id=str(uuid.uuid4()),
            trade_type=TradeType.BUY,
            symbol=symbol,
            quantity=quantity,
            price=price,
            timestamp=now_utc(),
        )

        def write() -> None:
            self._position_repo.upsert(updated)
            self._trade_repo.append(trade)

        self._run_atomically(write)
        logger.info("Bought %s %s @ %s (avg now %s)", quantity, symbol, price, updated.average_price)
        return self._position_repo.list_all()

    def apply_sell(
        self,
        symbol: Optional[str],
        sell_price: Optional[Number],
        quantity: Optional[Number] = None,
    ) -> SaleConfirmation:
        """
        Sell an open position at `sell_price`.

        Without `quantity` the whole position is liquidated. With a quantity
        below the held amount the position shrinks and keeps its average.

        Returns:
            SaleConfirmation with proceeds = sell_price x disposed quantity.
        """
        symbol = self._require_symbol(symbol)
        sell_price = self._require_positive(sell_price, "sellPrice")

        position = self._position_repo.get(symbol)
        if position is None:
            raise NotFoundError("Position", symbol)

        if quantity is None:
            disposed = position.quantity
        else:
            disposed = self._require_positive(quantity, "quantity")
            if disposed > position.quantity:
                raise InsufficientSharesError(symbol, str(disposed), str(position.quantity))

        remaining = position.quantity - disposed
        proceeds = sell_price * disposed

        trade = Trade(
            trade_id=str(uuid.uuid4()),
            trade_type=TradeType.SELL,
            symbol=symbol,
            quantity=disposed,
            price=sell_price,
            proceeds=proceeds,
            timestamp=now_utc(),
        )

        def write() -> None:
            if remaining > 0:
                self._position_repo.upsert(
                    Position(symbol=symbol, quantity=remaining, average_price=position.average_price)
                )
            else:
                self._position_repo.delete(symbol)
            self._trade_repo.append(trade)

        self._run_atomically(write)
        logger.info("Sold %s %s @ %s for %s", disposed, symbol, sell_price, proceeds)

        return SaleConfirmation(
            symbol=symbol,
            quantity=disposed,
            price=sell_price,
            proceeds=proceeds,
            remaining_quantity=remaining,
        )

    def query_trades(
        self,
        symbol: Optional[str] = None,
        trade_type: Optional[Union[TradeType, str]] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> list[Trade]:
        """
        Query the trade log. All supplied filters must match.

        - symbol: exact match after upper-casing
        - trade_type: Buy/Sell, case-insensitive; unknown types match nothing
        - date_from/date_to: inclusive; a date_to without a time of day covers
          the whole day. An unparseable bound matches nothing rather than raising.
        """
        symbol = symbol.strip().upper() if symbol else None

        parsed_type: Optional[TradeType] = None
        if isinstance(trade_type, TradeType):
            parsed_type = trade_type
        elif trade_type:
            parsed_type = TradeType.parse(trade_type)
            if parsed_type is None:
                return []

        start = end = None
        try:
            if date_from:
                start = parse_datetime_utc(date_from)
            if date_to:
                end = parse_end_bound_utc(date_to)
        except (ValueError, OverflowError):
            logger.debug("Unparseable trade date filter from=%r to=%r", date_from, date_to)
            return []

        return self._trade_repo.query(
            symbol=symbol,
            trade_type=parsed_type,
            start=start,
            end=end,
        )

    def rebuild_positions(self) -> list[Position]:
        """
        Replace stored positions with those derived by replaying the trade log.

        Use after manual edits to the store or to repair drift.
        """
        rebuilt = replay_trades(self._trade_repo.list_all())
        rebuild_time = now_utc()

        def write() -> None:
            self._position_repo.delete_all()
            for position in rebuilt:
                position.updated_at = rebuild_time
                self._position_repo.upsert(position)

        self._run_atomically(write)
        logger.info("Rebuilt %d positions from trade log", len(rebuilt))
        return self._position_repo.list_all()

    def _run_atomically(self, write) -> None:
        """Run `write` and commit; roll everything back if any step fails."""
        try:
            write()
            self._uow.commit()
        except Exception:
            self._uow.rollback()
            raise

    @staticmethod
    def _require_symbol(symbol: Optional[str]) -> str:
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValidationError("symbol is required")
        return symbol.strip().upper()

    @staticmethod
    def _require_positive(value: Optional[Number], field: str) -> Decimal:
        """Coerce to Decimal; require a finite value > 0 on the 1e-8 grid."""
        if value is None or isinstance(value, bool):
            raise ValidationError(f"{field} is required")
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"{field} must be a number, got '{value}'")
        if not amount.is_finite() or amount <= 0:
            raise ValidationError(f"{field} must be > 0")
        try:
            fits = amount == amount.quantize(AMOUNT_STEP)
        except InvalidOperation:
            fits = False
        if not fits:
            raise ValidationError(f"{field} must have at most 8 decimal places, got '{value}'")
        return amount
