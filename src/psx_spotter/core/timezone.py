"""Timestamp helpers. Ledger timestamps are stored and reported in UTC."""

from datetime import datetime, time
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc

_END_OF_DAY = time(23, 59, 59, 999999)


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive datetimes are stored as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def _localize(dt: datetime, default_tz: Optional[pytz.BaseTzInfo]) -> datetime:
    if dt.tzinfo is None:
        tz = default_tz or UTC
        dt = tz.localize(dt)
    return to_utc(dt)


def parse_datetime_utc(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it in UTC.

    If no timezone is provided in the string, assumes UTC.
    Raises ValueError (or OverflowError) when the string cannot be parsed.
    """
    return _localize(date_parser.parse(value), default_tz)


def parse_end_bound_utc(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse an inclusive upper bound and return it in UTC.

    A value without any time of day (``2024-01-03``, ``20240103``,
    ``3 Jan 2024``) is extended to the last microsecond of that day.
    """
    midnight = datetime.combine(datetime.now().date(), time.min)
    start = date_parser.parse(value, default=midnight)
    end = date_parser.parse(value, default=datetime.combine(midnight.date(), _END_OF_DAY))
    if start.time() == time.min and end.time() == _END_OF_DAY:
        return _localize(end, default_tz)
    return _localize(start, default_tz)
