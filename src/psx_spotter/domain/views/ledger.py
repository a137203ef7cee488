"""View models for ledger and snapshot outputs."""

from dataclasses import dataclass, field
from decimal import Decimal

from psx_spotter.domain.models import VolumeLeader


@dataclass
class SaleConfirmation:
    """Result of a sell: what was disposed and the cash it realized."""

    symbol: str
    quantity: Decimal
    price: Decimal
    proceeds: Decimal
    remaining_quantity: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def closed_position(self) -> bool:
        return self.remaining_quantity == Decimal("0")


@dataclass
class SnapshotComparison:
    """Today's volume leaders plus the symbols absent from yesterday's list."""

    date: str
    volume_leaders: list[VolumeLeader] = field(default_factory=list)
    new_entries: list[VolumeLeader] = field(default_factory=list)
