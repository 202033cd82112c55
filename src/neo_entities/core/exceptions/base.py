"""Base exceptions for neo-entities.

All exceptions inherit from NeoEntitiesError and carry an error code and
structured details so callers can render or log them uniformly.
"""

from typing import Any, Dict, Optional


class NeoEntitiesError(Exception):
    """Base exception for all neo-entities errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoEntitiesError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-entities exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
