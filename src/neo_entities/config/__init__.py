"""Configuration module for neo-entities.

Persisted enum codes, validation settings and logging setup.
"""

from .constants import AuditFields, UserStatus
from .settings import EntitySettings, get_settings, reset_settings
from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    setup_logging,
)

__all__ = [
    # Constants
    "AuditFields",
    "UserStatus",

    # Settings
    "EntitySettings",
    "get_settings",
    "reset_settings",

    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]
