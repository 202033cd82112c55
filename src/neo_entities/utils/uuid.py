"""UUID utilities for neo-entities."""

import secrets
import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from .datetime import to_unix_micros, utc_now

_MAX_COUNTER = 0xFFF
_lock = threading.Lock()
_last_ms = -1
_last_counter = 0


def generate_uuid_v7(timestamp: Optional[datetime] = None) -> uuid.UUID:
    """
    Generate a time-ordered UUIDv7.

    The 12-bit ``rand_a`` field is used as a counter, so ids generated in
    the same millisecond (from any thread) still sort in generation order.
    When the counter overflows the timestamp is advanced by one millisecond,
    and clock-based ids keep using that timestamp until the clock catches up.
    Naive timestamps are read as UTC.

    Args:
        timestamp: Time to embed; defaults to the current UTC time

    Returns:
        UUIDv7 instance
    """
    global _last_ms, _last_counter

    timestamp_ms = to_unix_micros(timestamp or utc_now()) // 1000

    with _lock:
        if timestamp is None and timestamp_ms < _last_ms:
            timestamp_ms = _last_ms

        if timestamp_ms > _last_ms:
            # Leave headroom so the counter rarely overflows within a millisecond
            counter = secrets.randbits(11)
            _last_ms, _last_counter = timestamp_ms, counter
        elif timestamp_ms == _last_ms:
            counter = _last_counter + 1
            if counter > _MAX_COUNTER:
                timestamp_ms += 1
                counter = 0
            _last_ms, _last_counter = timestamp_ms, counter
        else:
            # Explicit timestamp older than the last one issued
            counter = secrets.randbits(11)

    value = (timestamp_ms & 0xFFFFFFFFFFFF) << 80
    value |= 0x7 << 76
    value |= counter << 64
    value |= 0b10 << 62
    value |= secrets.randbits(62)
    return uuid.UUID(int=value)


def extract_timestamp_from_uuid_v7(value: uuid.UUID) -> Optional[datetime]:
    """
    Extract the embedded timestamp from a UUIDv7.

    Returns:
        UTC datetime with millisecond precision, or None if not a UUIDv7
    """
    if value.version != 7:
        return None
    timestamp_ms = value.int >> 80
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)
