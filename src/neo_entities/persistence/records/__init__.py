"""Flat persistence records produced by the record factories."""

from .base import RecordBase
from .claims import ClaimDependencyRecord, ClaimRecord
from .roles import RoleClaimRecord, RoleHierarchyRecord, RoleRecord
from .service_clients import ServiceClientClaimRecord, ServiceClientScopeRecord
from .users import PasswordHistoryRecord, UserRecord, UserRoleRecord

__all__ = [
    "RecordBase",
    "ClaimRecord",
    "ClaimDependencyRecord",
    "RoleRecord",
    "RoleClaimRecord",
    "RoleHierarchyRecord",
    "UserRecord",
    "UserRoleRecord",
    "PasswordHistoryRecord",
    "ServiceClientClaimRecord",
    "ServiceClientScopeRecord",
]
