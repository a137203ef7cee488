"""JSON-file implementation of SnapshotRepository.

The scraper writes one ``<YYYY-MM-DD>.json`` file per trading day into the
snapshot directory. Older files may hold a bare array of ``{symbol, volume}``
rows; newer ones may wrap it as ``{"date": ..., "volumeLeaders": [...]}``.
This store hands back whatever was persisted; shape normalization happens in
``normalize_snapshot``.
"""

import json
import logging
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any

from psx_spotter.core.exceptions import MalformedDataError, NotFoundError, ValidationError
from psx_spotter.domain.models import VolumeLeader

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class FileSnapshotRepository:
    """Snapshot store backed by a directory of dated JSON files."""

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def list_dates(self) -> list[str]:
        """List snapshot dates (YYYY-MM-DD), ascending. Missing directory = none."""
        if not self._directory.is_dir():
            logger.debug("Snapshot directory %s does not exist", self._directory)
            return []

        dates = []
        for path in self._directory.glob("*.json"):
            if DATE_PATTERN.match(path.stem):
                dates.append(path.stem)
            else:
                logger.debug("Ignoring non-dated snapshot file %s", path.name)
        return sorted(dates)

    def read(self, date: str) -> Any:
        """Return the parsed JSON payload stored for a date."""
        path = self._path_for(date)
        if not path.is_file():
            raise NotFoundError("Snapshot", date)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedDataError(path.name, f"invalid JSON ({e.msg})") from e
        except UnicodeDecodeError as e:
            raise MalformedDataError(path.name, f"not UTF-8 ({e.reason} at byte {e.start})") from e

    def save(self, date: str, leaders: list[VolumeLeader]) -> None:
        """Write a snapshot as a bare array. Each date can be written once."""
        if not DATE_PATTERN.match(date):
            raise ValidationError(f"Snapshot date must be YYYY-MM-DD, got '{date}'")

        path = self._path_for(date)
        if path.exists():
            raise ValidationError(f"Snapshot for {date} already exists")

        self._directory.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump([asdict(leader) for leader in leaders], f, indent=2)
        logger.info("Saved %d volume leaders to %s", len(leaders), path)

    def _path_for(self, date: str) -> Path:
        return self._directory / f"{date}.json"
