"""Repository layer - data access abstractions and implementations."""

from psx_spotter.repositories.protocols import (
    PositionRepository,
    TradeRepository,
    SnapshotRepository,
    UnitOfWork,
)

__all__ = [
    "PositionRepository",
    "TradeRepository",
    "SnapshotRepository",
    "UnitOfWork",
]
