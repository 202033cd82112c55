"""Validation exceptions raised when a value object or entity field is built."""

from typing import Any, Dict, Optional

from .base import NeoEntitiesError


class ValidationError(NeoEntitiesError):
    """Raised when a field violates its invariant at construction time.

    The message always names the offending field and the violated rule.
    """

    default_rule = "invalid"

    def __init__(
        self,
        field: str,
        rule: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.rule = rule or self.default_rule
        super().__init__(
            message or f"{field}: violates rule '{self.rule}'",
            details={"field": field, "rule": self.rule, **(details or {})},
        )


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    default_rule = "required"


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    default_rule = "format"


class ValueOutOfRangeError(ValidationError):
    """Raised when value is outside allowed range or length."""

    default_rule = "range"


class InvalidEnumValueError(ValidationError):
    """Raised when enum value is invalid."""

    default_rule = "enum"
