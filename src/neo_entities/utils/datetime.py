"""
DateTime utilities for consistent timezone handling.
"""
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC. Naive datetimes are assumed to already be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_unix_micros(dt: datetime) -> int:
    """
    Convert a datetime to integer microseconds since the Unix epoch.

    Integer arithmetic on the timedelta keeps the conversion exact.
    """
    delta = to_utc(dt) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def from_unix_micros(micros: int) -> datetime:
    """
    Convert integer microseconds since the Unix epoch back to a UTC datetime.
    """
    return _EPOCH + timedelta(microseconds=micros)
