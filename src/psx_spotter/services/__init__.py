"""Service layer - business logic orchestration."""

from psx_spotter.services.ledger_engine import LedgerEngine, replay_trades
from psx_spotter.services.snapshot_engine import SnapshotDiffEngine, normalize_snapshot

__all__ = [
    "LedgerEngine",
    "replay_trades",
    "SnapshotDiffEngine",
    "normalize_snapshot",
]
