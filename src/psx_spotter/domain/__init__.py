"""Domain layer - pure business models with no external dependencies."""

from psx_spotter.domain.models import (
    Position,
    Trade,
    TradeType,
    Snapshot,
    VolumeLeader,
)

__all__ = [
    "Position",
    "Trade",
    "TradeType",
    "Snapshot",
    "VolumeLeader",
]
