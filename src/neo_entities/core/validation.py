"""Field validation rules shared by value objects and entities.

Each rule knows which error type to raise, so callers get a message that
names the offending field and the violated rule.
"""

import re
from typing import Any, Callable, Iterable, Optional, Pattern, Type, Union

from .exceptions import (
    InvalidFormatError,
    RequiredFieldError,
    ValidationError,
    ValueOutOfRangeError,
)


class ValidationRule:
    """Represents a single validation rule."""

    def __init__(
        self,
        name: str,
        validator: Callable[[Any], bool],
        error_message: str,
        error_type: Type[ValidationError] = ValidationError,
    ):
        """Initialize validation rule.

        Args:
            name: Rule identifier, reported as ``ValidationError.rule``
            validator: Function that returns True if value is valid
            error_message: Message used when the rule fails
            error_type: ValidationError subclass to raise
        """
        self.name = name
        self.validator = validator
        self.error_message = error_message
        self.error_type = error_type

    def check(self, field: str, value: Any) -> None:
        """Raise the rule's error if ``value`` does not satisfy it."""
        if not self.validator(value):
            raise self.error_type(
                field=field,
                rule=self.name,
                message=f"{field}: {self.error_message}",
            )


class ValidationRuleBuilder:
    """Builder for common validation rules."""

    @staticmethod
    def required() -> ValidationRule:
        """Rule: value must be present."""
        return ValidationRule(
            name="required",
            validator=lambda v: v is not None,
            error_message="is required",
            error_type=RequiredFieldError,
        )

    @staticmethod
    def not_blank() -> ValidationRule:
        """Rule: string must contain a non-whitespace character."""
        return ValidationRule(
            name="required",
            validator=lambda v: isinstance(v, str) and bool(v.strip()),
            error_message="must not be empty",
            error_type=RequiredFieldError,
        )

    @staticmethod
    def instance_of(expected: Union[type, tuple], type_name: str) -> ValidationRule:
        """Rule: value must be an instance of ``expected``."""
        return ValidationRule(
            name="type",
            validator=lambda v: isinstance(v, expected),
            error_message=f"must be {type_name}",
            error_type=InvalidFormatError,
        )

    @staticmethod
    def not_empty_bytes() -> ValidationRule:
        """Rule: byte sequence must not be empty."""
        return ValidationRule(
            name="required",
            validator=lambda v: len(v) > 0,
            error_message="must not be empty",
            error_type=RequiredFieldError,
        )

    @staticmethod
    def strict_int() -> ValidationRule:
        """Rule: value must be an int (bool is rejected)."""
        return ValidationRule(
            name="type",
            validator=lambda v: isinstance(v, int) and not isinstance(v, bool),
            error_message="must be an integer",
            error_type=InvalidFormatError,
        )

    @staticmethod
    def max_length(max_len: int, unit: str = "characters") -> ValidationRule:
        """Rule: sized value must not exceed maximum length."""
        return ValidationRule(
            name="max_length",
            validator=lambda v: len(v) <= max_len,
            error_message=f"must be at most {max_len} {unit}",
            error_type=ValueOutOfRangeError,
        )

    @staticmethod
    def int_range(min_value: int, max_value: int) -> ValidationRule:
        """Rule: integer must lie within [min_value, max_value]."""
        return ValidationRule(
            name="range",
            validator=lambda v: min_value <= v <= max_value,
            error_message=f"must be between {min_value} and {max_value}",
            error_type=ValueOutOfRangeError,
        )

    @staticmethod
    def regex_pattern(pattern: Union[str, Pattern], description: str) -> ValidationRule:
        """Rule: the whole string must match regex pattern."""
        compiled_pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        return ValidationRule(
            name="format",
            validator=lambda v: bool(compiled_pattern.fullmatch(v)),
            error_message=f"must be {description}",
            error_type=InvalidFormatError,
        )


def validate_field(field: str, value: Any, rules: Iterable[ValidationRule]) -> None:
    """Check ``value`` against ``rules`` in order, raising on the first failure."""
    for rule in rules:
        rule.check(field, value)


def validate_text(
    field: str,
    value: Optional[str],
    max_length: int,
    required: bool = True,
) -> None:
    """Validate a text field: type, presence and maximum length.

    Optional fields accept ``None``. Given values are stored verbatim, so only
    required fields reject blank strings.
    """
    if value is None:
        if required:
            ValidationRuleBuilder.required().check(field, value)
        return

    rules = [ValidationRuleBuilder.instance_of(str, "a string")]
    if required:
        rules.append(ValidationRuleBuilder.not_blank())
    rules.append(ValidationRuleBuilder.max_length(max_length))
    validate_field(field, value, rules)


def validate_instance(field: str, value: Any, expected: type, type_name: str) -> None:
    """Validate a required field holding an instance of ``expected``."""
    validate_field(field, value, [
        ValidationRuleBuilder.required(),
        ValidationRuleBuilder.instance_of(expected, type_name),
    ])
