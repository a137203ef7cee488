"""Snapshot store protocol."""

from typing import Any, Protocol

from psx_spotter.domain.models import VolumeLeader


class SnapshotRepository(Protocol):
    """Interface for the dated volume-leader snapshot store."""

    def list_dates(self) -> list[str]:
        """List snapshot dates (YYYY-MM-DD), ascending."""
        ...

    def read(self, date: str) -> Any:
        """Return the raw persisted payload for a date."""
        ...

    def save(self, date: str, leaders: list[VolumeLeader]) -> None:
        """Persist a new snapshot for a date."""
        ...
