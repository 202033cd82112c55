"""Claim value object."""

from dataclasses import dataclass
from typing import Any, ClassVar

from ..validation import ValidationRuleBuilder, validate_field


@dataclass(frozen=True, order=True)
class ClaimValue:
    """Effect of a claim assignment: denied (-1), inherited (0) or granted (1)."""

    value: int

    MIN_VALUE: ClassVar[int] = -1
    MAX_VALUE: ClassVar[int] = 1

    DENIED: ClassVar["ClaimValue"]
    INHERITED: ClassVar["ClaimValue"]
    GRANTED: ClassVar["ClaimValue"]

    def __post_init__(self) -> None:
        validate_field("claim_value", self.value, [
            ValidationRuleBuilder.strict_int(),
            ValidationRuleBuilder.int_range(self.MIN_VALUE, self.MAX_VALUE),
        ])

    @classmethod
    def create(cls, value: int) -> "ClaimValue":
        return cls(value)

    @classmethod
    def is_valid_value(cls, value: Any) -> bool:
        """Check a raw value without constructing."""
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and cls.MIN_VALUE <= value <= cls.MAX_VALUE
        )

    @property
    def is_granted(self) -> bool:
        return self.value > 0

    @property
    def is_denied(self) -> bool:
        return self.value < 0

    @property
    def is_inherited(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value


ClaimValue.DENIED = ClaimValue(-1)
ClaimValue.INHERITED = ClaimValue(0)
ClaimValue.GRANTED = ClaimValue(1)
