"""Domain models package."""

from psx_spotter.domain.models.enums import TradeType
from psx_spotter.domain.models.position import Position
from psx_spotter.domain.models.trade import Trade
from psx_spotter.domain.models.snapshot import Snapshot, VolumeLeader

__all__ = [
    "TradeType",
    "Position",
    "Trade",
    "Snapshot",
    "VolumeLeader",
]
