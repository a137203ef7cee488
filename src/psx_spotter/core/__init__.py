"""Core utilities and shared functionality."""

from psx_spotter.core.timezone import (
    now_utc,
    to_utc,
    parse_datetime_utc,
    UTC,
)
from psx_spotter.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InsufficientSharesError,
    NoDataError,
    MalformedDataError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_datetime_utc",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InsufficientSharesError",
    "NoDataError",
    "MalformedDataError",
]
