"""Enumerations for domain models."""

from enum import Enum
from typing import Optional


class TradeType(str, Enum):
    """Types of ledger trades."""

    BUY = "Buy"
    SELL = "Sell"

    @classmethod
    def parse(cls, value: str) -> Optional["TradeType"]:
        """Match a trade type case-insensitively; None when unknown."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None
