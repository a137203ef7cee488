"""Trade log repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from psx_spotter.domain.models import Trade, TradeType


class TradeRepository(Protocol):
    """Interface for the append-only trade log."""

    def append(self, trade: Trade) -> Trade:
        """Append a trade to the log."""
        ...

    def list_all(self) -> list[Trade]:
        """List every trade in insertion order."""
        ...

    def query(
        self,
        symbol: Optional[str] = None,
        trade_type: Optional[TradeType] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Trade]:
        """List trades matching all supplied filters, in insertion order."""
        ...
