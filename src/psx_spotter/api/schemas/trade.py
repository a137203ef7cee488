"""Pydantic schemas for trade endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from psx_spotter.domain.models.enums import TradeType


class TradeResponse(BaseModel):
    """A single trade log entry."""

    model_config = ConfigDict(populate_by_name=True)

    trade_id: str = Field(alias="tradeId")
    type: TradeType
    symbol: str
    quantity: float
    price: float
    proceeds: Optional[float] = None
    timestamp: datetime


class TradeListResponse(BaseModel):
    """Response for GET /api/trades."""

    trades: list[TradeResponse]
