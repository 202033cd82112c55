"""Utility functions for neo-entities."""

from .datetime import from_unix_micros, to_unix_micros, to_utc, utc_now
from .uuid import extract_timestamp_from_uuid_v7, generate_uuid_v7

__all__ = [
    "utc_now",
    "to_utc",
    "to_unix_micros",
    "from_unix_micros",
    "generate_uuid_v7",
    "extract_timestamp_from_uuid_v7",
]
