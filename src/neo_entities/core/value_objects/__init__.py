"""Value objects module for neo-entities.

Immutable, validated wrappers around primitive data. Validation happens
once, at construction; unwrapping ``.value`` never re-validates.
"""

from .identifiers import Id, TenantInfo, RegistryVersion
from .email_address import EmailAddress
from .password_hash import PasswordHash
from .claim_value import ClaimValue

__all__ = [
    # Identity, tenancy and version
    "Id",
    "TenantInfo",
    "RegistryVersion",

    # Domain value objects
    "EmailAddress",
    "PasswordHash",
    "ClaimValue",
]
