"""Trade domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from psx_spotter.domain.models.enums import TradeType


@dataclass(frozen=True)
class Trade:
    """
    Ledger trade entry (source of truth).

    Appended once per accepted buy or sell and never edited.
    - proceeds is set on SELL only (price x disposed quantity)
    - timestamp is an aware UTC datetime
    """

    trade_id: str
    trade_type: TradeType
    symbol: str
    quantity: Decimal
    price: Decimal
    timestamp: datetime
    proceeds: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str) and not isinstance(self.trade_type, TradeType):
            object.__setattr__(self, "trade_type", TradeType(self.trade_type))

    @property
    def is_buy(self) -> bool:
        return self.trade_type == TradeType.BUY

    @property
    def is_sell(self) -> bool:
        return self.trade_type == TradeType.SELL
