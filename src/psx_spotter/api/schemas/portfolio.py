"""Pydantic schemas for portfolio endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BuyRequest(BaseModel):
    """Request schema for a buy. Range checks are left to the ledger engine."""

    symbol: Optional[str] = Field(default=None, max_length=20, description="Ticker symbol")
    quantity: Optional[Decimal] = Field(
        default=None,
        validation_alias=AliasChoices("quantity", "qty"),
        description="Number of shares",
    )
    price: Optional[Decimal] = Field(default=None, description="Price per share")


class SellRequest(BaseModel):
    """Request schema for a sell. Omit quantity to liquidate the whole position."""

    model_config = ConfigDict(populate_by_name=True)

    sell_price: Optional[Decimal] = Field(default=None, alias="sellPrice")
    quantity: Optional[Decimal] = Field(default=None, validation_alias=AliasChoices("quantity", "qty"))


class PositionResponse(BaseModel):
    """A single open position."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    quantity: float
    average_price: float = Field(alias="averagePrice")


class PortfolioResponse(BaseModel):
    """Response for GET /api/portfolio."""

    portfolio: list[PositionResponse]


class BuyResponse(BaseModel):
    """Response for a buy or a rebuild: the refreshed position set."""

    success: bool = True
    portfolio: list[PositionResponse]


class SellResponse(BaseModel):
    """Response for a sell."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    symbol: str
    quantity: float
    price: float
    proceeds: float
    # Older clients read the realized cash from newBalance
    new_balance: float = Field(alias="newBalance")
