"""Password hash value object."""

from dataclasses import dataclass, field
from typing import Iterable, Union

from ..exceptions import InvalidFormatError
from ..validation import ValidationRuleBuilder, validate_field
from ...config.settings import get_settings

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _to_bytes(raw: BytesLike) -> bytes:
    if isinstance(raw, bytes):
        return raw
    if isinstance(raw, (str, int)):
        raise InvalidFormatError(
            field="password_hash",
            message=f"password_hash: must be a byte sequence, not {type(raw).__name__}",
        )
    try:
        return bytes(raw)
    except (TypeError, ValueError):
        raise InvalidFormatError(
            field="password_hash",
            message="password_hash: must be a byte sequence",
        ) from None


@dataclass(frozen=True)
class PasswordHash:
    """Opaque password digest.

    Handles ONLY digest storage and comparison. Hashing and verification are
    done by the credential service that produced the digest.
    """

    value: bytes = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_bytes(self.value))
        validate_field("password_hash", self.value, [
            ValidationRuleBuilder.not_empty_bytes(),
            ValidationRuleBuilder.max_length(get_settings().password_hash_max_length, "bytes"),
        ])

    @classmethod
    def create(cls, raw: BytesLike) -> "PasswordHash":
        """Create from bytes or any iterable of ints in 0..255."""
        return cls(raw)

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        # Never expose the digest in logs
        return f"PasswordHash(<{len(self.value)} bytes>)"
