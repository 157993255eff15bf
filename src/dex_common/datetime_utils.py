"""UTC datetime utilities."""

from datetime import datetime, timezone

from src.dex_common.errors import InvalidInputError


def to_utc(value: datetime) -> datetime:
    """Convert a timezone-aware datetime to UTC. Naive datetimes are rejected."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidInputError("timestamp must be timezone-aware")
    return value.astimezone(timezone.utc)
