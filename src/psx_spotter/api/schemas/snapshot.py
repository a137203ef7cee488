"""Pydantic schemas for volume-leader snapshot endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class VolumeLeaderResponse(BaseModel):
    symbol: str
    volume: str


class SnapshotComparisonResponse(BaseModel):
    """Today's volume leaders and the symbols new since yesterday."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    volume_leaders: list[VolumeLeaderResponse] = Field(alias="volumeLeaders")
    new_entries: list[VolumeLeaderResponse] = Field(alias="newEntries")


class SnapshotDatesResponse(BaseModel):
    dates: list[str]
