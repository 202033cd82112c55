"""Exceptions module for neo-entities."""

from .base import NeoEntitiesError, create_error_response
from .validation import (
    ValidationError,
    RequiredFieldError,
    InvalidFormatError,
    ValueOutOfRangeError,
    InvalidEnumValueError,
)
from .state import InvalidStateError

__all__ = [
    # Base Exception
    "NeoEntitiesError",
    "create_error_response",

    # Validation Errors
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "ValueOutOfRangeError",
    "InvalidEnumValueError",

    # State Errors
    "InvalidStateError",
]
