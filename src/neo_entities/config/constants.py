"""Constants and enums for neo-entities.

Enum values here are persisted as-is by the record factories, so an
assigned code must never be reused or renumbered.
"""

from enum import Enum
from typing import Final, Tuple


class UserStatus(int, Enum):
    """User account status - persisted as a smallint code."""

    ACTIVE = 1
    SUSPENDED = 2
    BLOCKED = 3

    @classmethod
    def from_code(cls, code: int) -> "UserStatus":
        """Resolve a persisted status code.

        Raises:
            InvalidEnumValueError: If the code was never assigned
        """
        try:
            return cls(code)
        except ValueError:
            from ..core.exceptions import InvalidEnumValueError
            raise InvalidEnumValueError(
                field="status",
                rule="enum",
                message=f"status: unknown user status code {code!r}",
            ) from None


class AuditFields:
    """Names of the envelope audit fields, as they appear on persistence records."""

    CREATION: Final[Tuple[str, ...]] = (
        "created_at",
        "created_by",
        "created_correlation_id",
        "created_execution_origin",
        "created_business_operation_code",
    )

    LAST_CHANGE: Final[Tuple[str, ...]] = (
        "last_changed_at",
        "last_changed_by",
        "last_changed_correlation_id",
        "last_changed_execution_origin",
        "last_changed_business_operation_code",
    )
