"""Repository protocol definitions (interfaces)."""

from psx_spotter.repositories.protocols.position_repo import PositionRepository
from psx_spotter.repositories.protocols.trade_repo import TradeRepository
from psx_spotter.repositories.protocols.snapshot_repo import SnapshotRepository
from psx_spotter.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "PositionRepository",
    "TradeRepository",
    "SnapshotRepository",
    "UnitOfWork",
]
