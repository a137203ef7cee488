"""Volume-leader snapshot endpoints."""

from fastapi import APIRouter, Depends

from psx_spotter.api.deps import get_snapshot_engine
from psx_spotter.api.schemas import (
    VolumeLeaderResponse,
    SnapshotComparisonResponse,
    SnapshotDatesResponse,
)
from psx_spotter.services import SnapshotDiffEngine

router = APIRouter(prefix="/api", tags=["snapshots"])


@router.get("/snapshot", response_model=SnapshotComparisonResponse)
def compare_snapshots(
    engine: SnapshotDiffEngine = Depends(get_snapshot_engine),
) -> SnapshotComparisonResponse:
    """Compare today's volume leaders with yesterday's."""
    comparison = engine.compare_latest_two()
    return SnapshotComparisonResponse(
        date=comparison.date,
        volume_leaders=[
            VolumeLeaderResponse(symbol=leader.symbol, volume=leader.volume)
            for leader in comparison.volume_leaders
        ],
        new_entries=[
            VolumeLeaderResponse(symbol=leader.symbol, volume=leader.volume)
            for leader in comparison.new_entries
        ],
    )


@router.get("/snapshots", response_model=SnapshotDatesResponse)
def list_snapshots(
    engine: SnapshotDiffEngine = Depends(get_snapshot_engine),
) -> SnapshotDatesResponse:
    """List the dates that have a stored snapshot."""
    return SnapshotDatesResponse(dates=engine.list_snapshot_dates())
