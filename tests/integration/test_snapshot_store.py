"""
Integration tests for the JSON-file snapshot store.

Tests cover:
- Listing dated files in order and skipping others
- Reading bare and wrapped payloads
- Invalid JSON and missing files
- Write-once saves
"""

import json

import pytest

from psx_spotter.repositories.files import FileSnapshotRepository
from psx_spotter.domain.models import VolumeLeader
from psx_spotter.core.exceptions import MalformedDataError, NotFoundError, ValidationError

from tests.conftest import leaders


class TestFileSnapshotRepository:
    """Tests for FileSnapshotRepository."""

    def test_missing_directory_has_no_dates(self, snapshot_repo: FileSnapshotRepository):
        assert not snapshot_repo.directory.exists()
        assert snapshot_repo.list_dates() == []

    def test_list_dates_sorted_and_filtered(self, snapshot_repo, write_snapshot):
        """
        GIVEN dated files written out of order plus unrelated files
        WHEN I list dates
        THEN only YYYY-MM-DD stems are returned, ascending
        """
        write_snapshot("2024-01-10", [])
        write_snapshot("2023-12-29", [])
        write_snapshot("2024-01-02", [])
        write_snapshot("latest", [])
        (snapshot_repo.directory / "2024-01-03.txt").write_text("[]")

        assert snapshot_repo.list_dates() == ["2023-12-29", "2024-01-02", "2024-01-10"]

    def test_read_returns_payload_as_stored(self, snapshot_repo, write_snapshot):
        wrapped = {"date": "2024-01-02", "volumeLeaders": leaders("KEL")}
        write_snapshot("2024-01-02", wrapped)

        assert snapshot_repo.read("2024-01-02") == wrapped

    def test_read_invalid_json_raises_malformed(self, snapshot_repo, write_snapshot):
        write_snapshot("2024-01-02", "[{\"symbol\": ")

        with pytest.raises(MalformedDataError) as exc_info:
            snapshot_repo.read("2024-01-02")

        assert "2024-01-02.json" in exc_info.value.message

    def test_read_invalid_utf8_raises_malformed(self, snapshot_repo, write_snapshot):
        """
        GIVEN a snapshot file whose bytes are not valid UTF-8
        WHEN I read it
        THEN MalformedDataError names the file instead of a decode error escaping
        """
        write_snapshot("2024-01-02", "[]").write_bytes(b'[{"symbol": "\xff\xfe"}]')

        with pytest.raises(MalformedDataError) as exc_info:
            snapshot_repo.read("2024-01-02")

        assert "2024-01-02.json" in exc_info.value.message

    def test_read_missing_date_raises_not_found(self, snapshot_repo):
        with pytest.raises(NotFoundError):
            snapshot_repo.read("2024-01-02")

    def test_save_writes_bare_array(self, snapshot_repo):
        snapshot_repo.save("2024-01-02", [VolumeLeader(symbol="KEL", volume="1,000")])

        stored = json.loads((snapshot_repo.directory / "2024-01-02.json").read_text())
        assert stored == [{"symbol": "KEL", "volume": "1,000"}]
        assert snapshot_repo.list_dates() == ["2024-01-02"]

    def test_save_is_write_once(self, snapshot_repo):
        snapshot_repo.save("2024-01-02", [])

        with pytest.raises(ValidationError):
            snapshot_repo.save("2024-01-02", [VolumeLeader(symbol="KEL", volume="1")])

    def test_save_rejects_bad_date(self, snapshot_repo):
        with pytest.raises(ValidationError):
            snapshot_repo.save("../escape", [])


class TestSnapshotEngineOverFiles:
    """The diff engine against real files written by the scraper."""

    def test_compare_bare_and_wrapped_files(self, snapshot_engine, write_snapshot):
        write_snapshot("2024-01-01", leaders("A", "B"))
        write_snapshot("2024-01-02", {"date": "2024-01-02", "volumeLeaders": leaders("A", "C")})

        result = snapshot_engine.compare_latest_two()

        assert result.date == "2024-01-02"
        assert [leader.symbol for leader in result.new_entries] == ["C"]

    def test_corrupt_latest_file_is_fatal(self, snapshot_engine, write_snapshot):
        write_snapshot("2024-01-01", leaders("A"))
        write_snapshot("2024-01-02", "not json")

        with pytest.raises(MalformedDataError):
            snapshot_engine.compare_latest_two()

    def test_undecodable_yesterday_file_is_fatal(self, snapshot_engine, write_snapshot):
        write_snapshot("2024-01-01", "[]").write_bytes(b"\xff\xfe")
        write_snapshot("2024-01-02", leaders("A"))

        with pytest.raises(MalformedDataError):
            snapshot_engine.compare_latest_two()
