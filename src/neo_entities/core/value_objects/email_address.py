"""Email address value object."""

import re
from dataclasses import dataclass
from typing import ClassVar, Pattern

from ..validation import ValidationRuleBuilder, validate_field
from ...config.settings import get_settings


@dataclass(frozen=True, eq=False)
class EmailAddress:
    """Validated email address.

    The raw string is kept verbatim for persistence; equality and hashing
    ignore case, as mailbox lookups do.
    """

    value: str

    # No whitespace or control characters anywhere
    PATTERN: ClassVar[Pattern] = re.compile(
        r"[^@\s\x00-\x1f\x7f]+@[^@\s.\x00-\x1f\x7f]+(\.[^@\s.\x00-\x1f\x7f]+)+"
    )

    def __post_init__(self) -> None:
        validate_field("email", self.value, [
            ValidationRuleBuilder.instance_of(str, "a string"),
            ValidationRuleBuilder.not_blank(),
            ValidationRuleBuilder.max_length(get_settings().email_max_length),
            ValidationRuleBuilder.regex_pattern(self.PATTERN, "a valid email address"),
        ])

    @classmethod
    def create(cls, raw: str) -> "EmailAddress":
        return cls(raw)

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self.value.casefold() == other.value.casefold()

    def __hash__(self) -> int:
        return hash(self.value.casefold())

    def __str__(self) -> str:
        return self.value
