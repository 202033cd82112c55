"""Persistence record factories.

``<Entity>RecordFactory.create(entity)`` flattens an entity into its record;
``<Entity>Factory.create(record)`` rebuilds the entity. ``create_record`` and
``create_entity`` dispatch on type.
"""

from .base import entity_info_fields, entity_info_from_record
from .claims import ClaimDependencyFactory, ClaimDependencyRecordFactory, ClaimFactory, ClaimRecordFactory
from .roles import (
    RoleClaimFactory,
    RoleClaimRecordFactory,
    RoleFactory,
    RoleHierarchyFactory,
    RoleHierarchyRecordFactory,
    RoleRecordFactory,
)
from .service_clients import (
    ServiceClientClaimFactory,
    ServiceClientClaimRecordFactory,
    ServiceClientScopeFactory,
    ServiceClientScopeRecordFactory,
)
from .users import (
    PasswordHistoryFactory,
    PasswordHistoryRecordFactory,
    UserFactory,
    UserRecordFactory,
    UserRoleFactory,
    UserRoleRecordFactory,
)
from .registry import ENTITY_FACTORIES, RECORD_FACTORIES, create_entity, create_record

__all__ = [
    "entity_info_fields",
    "entity_info_from_record",
    "ClaimRecordFactory",
    "ClaimFactory",
    "ClaimDependencyRecordFactory",
    "ClaimDependencyFactory",
    "RoleRecordFactory",
    "RoleFactory",
    "RoleClaimRecordFactory",
    "RoleClaimFactory",
    "RoleHierarchyRecordFactory",
    "RoleHierarchyFactory",
    "UserRecordFactory",
    "UserFactory",
    "UserRoleRecordFactory",
    "UserRoleFactory",
    "PasswordHistoryRecordFactory",
    "PasswordHistoryFactory",
    "ServiceClientClaimRecordFactory",
    "ServiceClientClaimFactory",
    "ServiceClientScopeRecordFactory",
    "ServiceClientScopeFactory",
    "RECORD_FACTORIES",
    "ENTITY_FACTORIES",
    "create_record",
    "create_entity",
]
