"""Core module for neo-entities.

Exceptions, value objects, validation rules and the audit envelope. Domain
entities live in ``features/``, persistence mapping in ``persistence/``.
"""

from .exceptions import *
from .value_objects import *
from .entities import *

__all__ = [
    # Exceptions
    "NeoEntitiesError",
    "create_error_response",
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "ValueOutOfRangeError",
    "InvalidEnumValueError",
    "InvalidStateError",

    # Value Objects
    "Id",
    "TenantInfo",
    "RegistryVersion",
    "EmailAddress",
    "PasswordHash",
    "ClaimValue",

    # Envelope
    "ExecutionContext",
    "EntityInfo",
    "AuditedEntity",
    "register_entity_change",
]
