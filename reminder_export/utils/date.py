"""
Date rendering utilities.

Timestamps are rendered from a canonical UTC description of the form
``"Mon Jan 15 10:30:00 +0000 2024"``. The full form drops the offset
marker; the simple form additionally trims three trailing characters.
"""

from datetime import datetime, timezone
from typing import Optional

UTC_OFFSET_MARKER = " +0000"
DESCRIPTION_FORMAT = "%a %b %d %H:%M:%S +0000 %Y"
SIMPLE_TRIM = 3


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def describe_timestamp(value: datetime) -> str:
    """Canonical human-readable description of a timestamp in UTC."""
    return to_utc(value).strftime(DESCRIPTION_FORMAT)


def strip_utc_offset(description: str) -> str:
    """
    Truncate a description at the first UTC offset marker.

    Returns the description unchanged when the marker is absent.
    """
    return description.split(UTC_OFFSET_MARKER, 1)[0]


def format_full(value: datetime) -> str:
    """
    Render a timestamp for the full schema.

    Example: ``"Mon Jan 15 10:30:00 2024"``
    """
    return strip_utc_offset(describe_timestamp(value))


def format_simple(value: datetime) -> str:
    """
    Render a timestamp for the simple schema.

    This is the full rendering with its last three characters removed, so
    ``"Mon Jan 15 10:30:00 2024"`` becomes ``"Mon Jan 15 10:30:00 2"``.
    """
    return format_full(value)[:-SIMPLE_TRIM]


def from_epoch(seconds: Optional[float]) -> Optional[datetime]:
    """Convert seconds since the Unix epoch to an aware UTC datetime."""
    if seconds is None:
        return None
    return datetime.fromtimestamp(float(seconds), tz=timezone.utc)
