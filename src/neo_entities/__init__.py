"""Neo-Entities - audited, multi-tenant domain entities for the NeoMultiTenant platform.

Every entity embeds an ``EntityInfo`` envelope (identity, tenant, optimistic
concurrency version, creation and last-change audit trails). The persistence
layer maps entities to flat records and back without losing a field.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    UserStatus,
    EntitySettings,
    get_settings,
)

from .core.exceptions import (
    # Base Exception
    NeoEntitiesError,

    # Validation and state errors
    ValidationError,
    RequiredFieldError,
    InvalidFormatError,
    ValueOutOfRangeError,
    InvalidEnumValueError,
    InvalidStateError,

    # Utility Functions
    create_error_response,
)

from .core.value_objects import (
    Id,
    TenantInfo,
    RegistryVersion,
    EmailAddress,
    PasswordHash,
    ClaimValue,
)

from .core.entities import (
    EntityInfo,
    ExecutionContext,
    AuditedEntity,
)

from .features.claims import Claim, ClaimDependency
from .features.roles import Role, RoleClaim, RoleHierarchy
from .features.users import User, UserRole, PasswordHistory
from .features.service_clients import ServiceClientClaim, ServiceClientScope

from .persistence.factories import create_entity, create_record

__all__ = [
    "__version__",

    # Configuration
    "UserStatus",
    "EntitySettings",
    "get_settings",

    # Exceptions
    "NeoEntitiesError",
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "ValueOutOfRangeError",
    "InvalidEnumValueError",
    "InvalidStateError",
    "create_error_response",

    # Value Objects
    "Id",
    "TenantInfo",
    "RegistryVersion",
    "EmailAddress",
    "PasswordHash",
    "ClaimValue",

    # Envelope
    "EntityInfo",
    "ExecutionContext",
    "AuditedEntity",

    # Entities
    "Claim",
    "ClaimDependency",
    "Role",
    "RoleClaim",
    "RoleHierarchy",
    "User",
    "UserRole",
    "PasswordHistory",
    "ServiceClientClaim",
    "ServiceClientScope",

    # Persistence
    "create_record",
    "create_entity",
]
