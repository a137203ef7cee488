"""View models package."""

from psx_spotter.domain.views.ledger import SaleConfirmation, SnapshotComparison

__all__ = [
    "SaleConfirmation",
    "SnapshotComparison",
]
