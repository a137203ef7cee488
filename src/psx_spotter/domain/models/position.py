"""Position domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Position:
    """
    Current holding of one symbol at weighted-average cost.

    A symbol appears at most once; the position is removed (never zeroed)
    once its full quantity has been sold.
    """

    symbol: str
    quantity: Decimal
    average_price: Decimal
    updated_at: Optional[datetime] = field(default=None)

    def blend(self, quantity: Decimal, price: Decimal) -> "Position":
        """Return this position after buying `quantity` more at `price`."""
        total_quantity = self.quantity + quantity
        average = (self.average_price * self.quantity + price * quantity) / total_quantity
        return Position(
            symbol=self.symbol,
            quantity=total_quantity,
            average_price=average,
        )
