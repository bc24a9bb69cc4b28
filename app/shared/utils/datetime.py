"""UTC time helpers.

Timestamps stored on sections, agreements and profiles are timezone-aware
UTC; storage refs embed epoch milliseconds.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def epoch_ms(dt: datetime | None = None) -> int:
    """Milliseconds since the Unix epoch for dt, or for now when dt is None.

    A naive dt is read as UTC.
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)
