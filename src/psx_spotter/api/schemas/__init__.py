"""Pydantic schemas for API request/response."""

from psx_spotter.api.schemas.portfolio import (
    BuyRequest,
    SellRequest,
    PositionResponse,
    PortfolioResponse,
    BuyResponse,
    SellResponse,
)
from psx_spotter.api.schemas.trade import TradeResponse, TradeListResponse
from psx_spotter.api.schemas.snapshot import (
    VolumeLeaderResponse,
    SnapshotComparisonResponse,
    SnapshotDatesResponse,
)

__all__ = [
    "BuyRequest",
    "SellRequest",
    "PositionResponse",
    "PortfolioResponse",
    "BuyResponse",
    "SellResponse",
    "TradeResponse",
    "TradeListResponse",
    "VolumeLeaderResponse",
    "SnapshotComparisonResponse",
    "SnapshotDatesResponse",
]
