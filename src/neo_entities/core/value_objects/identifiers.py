"""Identity, tenancy and version value objects.

``Id`` and ``TenantInfo`` wrap 128-bit identifiers; ``RegistryVersion`` is the
optimistic-concurrency token carried by every entity envelope. All three are
immutable and compare by value.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
from uuid import UUID

from ..exceptions import InvalidFormatError
from ...utils.datetime import from_unix_micros, to_unix_micros, utc_now
from ...utils.uuid import extract_timestamp_from_uuid_v7, generate_uuid_v7


def _coerce_uuid(value: Any, field_name: str) -> UUID:
    """Accept a UUID or its string form; anything else is malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidFormatError(
            field=field_name,
            message=f"{field_name}: must be a valid UUID, got {value!r}",
        ) from None


@dataclass(frozen=True, order=True)
class Id:
    """Opaque entity identifier backed by a UUID (UUIDv7 when generated here)."""

    value: UUID

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _coerce_uuid(self.value, "id"))

    @classmethod
    def generate_new(cls, now: Optional[datetime] = None) -> "Id":
        """Generate a new time-ordered Id."""
        return cls(generate_uuid_v7(now))

    @classmethod
    def create_from_existing_info(cls, value: Union[UUID, str]) -> "Id":
        """Wrap a previously stored identifier."""
        return cls(value)

    @property
    def timestamp(self) -> Optional[datetime]:
        """Creation time embedded in a UUIDv7 Id, None for other versions."""
        return extract_timestamp_from_uuid_v7(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TenantInfo:
    """Tenant scope of an entity.

    Identity is the tenant ``code``; ``name`` is a display label only and takes
    no part in equality or hashing.
    """

    code: UUID
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", _coerce_uuid(self.code, "tenant_code"))

    @classmethod
    def create(cls, code: Union[UUID, str], name: Optional[str] = None) -> "TenantInfo":
        """Create tenant info from a tenant code and optional name."""
        return cls(code, name)

    def with_name(self, name: Optional[str]) -> "TenantInfo":
        """Return a copy carrying a different display name."""
        return TenantInfo(self.code, name)

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} ({self.code})"
        return str(self.code)


_version_lock = threading.Lock()
_last_version = 0


@dataclass(frozen=True, order=True)
class RegistryVersion:
    """Optimistic-concurrency version.

    The value is UTC microseconds since the Unix epoch. Versions generated in
    this process are strictly increasing even when the clock stalls.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidFormatError(
                field="entity_version",
                message=f"entity_version: must be an integer, got {self.value!r}",
            )

    @classmethod
    def generate_new(cls, now: Optional[datetime] = None) -> "RegistryVersion":
        """Generate a version greater than any previously generated one."""
        global _last_version

        candidate = to_unix_micros(now or utc_now())
        with _version_lock:
            value = max(candidate, _last_version + 1)
            _last_version = value
        return cls(value)

    @classmethod
    def create_from_existing_info(cls, value: Union[int, datetime]) -> "RegistryVersion":
        """Wrap a stored version, given as its raw integer or as a timestamp."""
        if isinstance(value, datetime):
            return cls(to_unix_micros(value))
        return cls(value)

    def as_datetime(self) -> datetime:
        """Timestamp the version was derived from."""
        return from_unix_micros(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
