"""File-backed repository implementations."""

from psx_spotter.repositories.files.snapshot_repo import FileSnapshotRepository

__all__ = ["FileSnapshotRepository"]
