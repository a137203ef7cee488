"""Snapshot diff engine for daily volume leaders."""

import logging
from typing import Any

from psx_spotter.core.exceptions import MalformedDataError, NoDataError
from psx_spotter.domain.models import Snapshot, VolumeLeader
from psx_spotter.domain.views import SnapshotComparison
from psx_spotter.repositories.protocols import SnapshotRepository

logger = logging.getLogger(__name__)


def normalize_snapshot(date_key: str, payload: Any) -> Snapshot:
    """
    Coerce a persisted snapshot into the canonical Snapshot shape.

    Accepts a bare list of ``{symbol, volume}`` rows (date taken from
    `date_key`) or a wrapped object ``{"date", "volumeLeaders"}``; a wrapped
    object without a date falls back to `date_key`.

    Raises:
        MalformedDataError: payload has neither shape, or a row lacks a symbol.
    """
    source = f"snapshot {date_key}"

    if isinstance(payload, list):
        date, rows = date_key, payload
    elif isinstance(payload, dict):
        rows = payload.get("volumeLeaders")
        if not isinstance(rows, list):
            raise MalformedDataError(source, "volumeLeaders is missing or not a list")
        date = payload.get("date")
        if not isinstance(date, str) or not date.strip():
            date = date_key
    else:
        raise MalformedDataError(source, f"unsupported payload type {type(payload).__name__}")

    leaders = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise MalformedDataError(source, f"row {index} is not an object")
        symbol = row.get("symbol")
        if not isinstance(symbol, str) or not symbol.strip():
            raise MalformedDataError(source, f"row {index} has no symbol")
        volume = row.get("volume")
        leaders.append(
            VolumeLeader(
                symbol=symbol.strip(),
                volume="" if volume is None else str(volume),
            )
        )

    return Snapshot(date=date, volume_leaders=leaders)


class SnapshotDiffEngine:
    """
    Compares the two most recent volume-leader snapshots.

    "Today" is the latest dated snapshot and "yesterday" the one before it;
    a lone snapshot is compared against an empty list.
    """

    def __init__(self, snapshot_repo: SnapshotRepository):
        self._snapshot_repo = snapshot_repo

    def list_snapshot_dates(self) -> list[str]:
        """Return stored snapshot dates, ascending."""
        return self._snapshot_repo.list_dates()

    def compare_latest_two(self) -> SnapshotComparison:
        """
        Diff the latest snapshot against the previous one.

        Returns:
            SnapshotComparison with today's full leader list and the leaders
            whose symbol does not appear anywhere in yesterday's list.

        Raises:
            NoDataError: no snapshots are stored.
            MalformedDataError: a snapshot cannot be read or normalized.
        """
        dates = self._snapshot_repo.list_dates()
        if not dates:
            raise NoDataError("No snapshot files found")

        today = self._load(dates[-1])
        if len(dates) > 1:
            yesterday = self._load(dates[-2])
        else:
            yesterday = Snapshot(date="", volume_leaders=[])

        previous_symbols = yesterday.symbols
        new_entries = [
            leader for leader in today.volume_leaders
            if leader.symbol not in previous_symbols
        ]

        logger.debug(
            "Compared %s against %s: %d new of %d",
            today.date,
            yesterday.date or "(none)",
            len(new_entries),
            len(today.volume_leaders),
        )
        return SnapshotComparison(
            date=today.date,
            volume_leaders=list(today.volume_leaders),
            new_entries=new_entries,
        )

    def _load(self, date: str) -> Snapshot:
        try:
            return normalize_snapshot(date, self._snapshot_repo.read(date))
        except MalformedDataError as e:
            logger.error("Cannot compare snapshots: %s", e.message)
            raise
