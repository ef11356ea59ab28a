"""ISO 8601 and Unix timestamp conversion utilities.

All transformations between datetime objects, ISO 8601 strings and Unix
seconds go through this module so that every timestamp is UTC.
"""

from datetime import datetime, UTC


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(datetime.now(UTC))


def utcnow() -> datetime:
    """Get current UTC time as an aware datetime."""
    return datetime.now(UTC)


def to_unix(dt: datetime) -> int:
    """Convert datetime to integer Unix seconds (naive values are UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp())


def from_unix(ts: int) -> datetime:
    """Convert Unix seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, UTC)


def now_unix() -> int:
    """Get current time as integer Unix seconds."""
    return to_unix(utcnow())
