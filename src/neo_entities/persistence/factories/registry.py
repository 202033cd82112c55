"""Dispatch entities and records to their factories by type."""

import logging
from typing import Any, Callable, Dict

from ...core.entities import AuditedEntity
from ...features.claims.entities import Claim, ClaimDependency
from ...features.roles.entities import Role, RoleClaim, RoleHierarchy
from ...features.service_clients.entities import ServiceClientClaim, ServiceClientScope
from ...features.users.entities import PasswordHistory, User, UserRole
from ..records import (
    ClaimDependencyRecord,
    ClaimRecord,
    PasswordHistoryRecord,
    RecordBase,
    RoleClaimRecord,
    RoleHierarchyRecord,
    RoleRecord,
    ServiceClientClaimRecord,
    ServiceClientScopeRecord,
    UserRecord,
    UserRoleRecord,
)
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

logger = logging.getLogger(__name__)

RECORD_FACTORIES: Dict[type, Callable[[Any], RecordBase]] = {
    Claim: ClaimRecordFactory.create,
    ClaimDependency: ClaimDependencyRecordFactory.create,
    Role: RoleRecordFactory.create,
    RoleClaim: RoleClaimRecordFactory.create,
    RoleHierarchy: RoleHierarchyRecordFactory.create,
    User: UserRecordFactory.create,
    UserRole: UserRoleRecordFactory.create,
    PasswordHistory: PasswordHistoryRecordFactory.create,
    ServiceClientClaim: ServiceClientClaimRecordFactory.create,
    ServiceClientScope: ServiceClientScopeRecordFactory.create,
}

ENTITY_FACTORIES: Dict[type, Callable[[Any], AuditedEntity]] = {
    ClaimRecord: ClaimFactory.create,
    ClaimDependencyRecord: ClaimDependencyFactory.create,
    RoleRecord: RoleFactory.create,
    RoleClaimRecord: RoleClaimFactory.create,
    RoleHierarchyRecord: RoleHierarchyFactory.create,
    UserRecord: UserFactory.create,
    UserRoleRecord: UserRoleFactory.create,
    PasswordHistoryRecord: PasswordHistoryFactory.create,
    ServiceClientClaimRecord: ServiceClientClaimFactory.create,
    ServiceClientScopeRecord: ServiceClientScopeFactory.create,
}


def create_record(entity: AuditedEntity) -> RecordBase:
    """Map any known entity to its persistence record.

    Raises:
        TypeError: If no factory is registered for the entity's type
    """
    factory = RECORD_FACTORIES.get(type(entity))
    if factory is None:
        raise TypeError(f"No record factory registered for {type(entity).__name__}")
    record = factory(entity)
    logger.debug(f"Mapped {type(entity).__name__} {entity.entity_info.id} to {type(record).__name__}")
    return record


def create_entity(record: RecordBase) -> AuditedEntity:
    """Rebuild the entity stored in ``record``.

    Raises:
        TypeError: If no factory is registered for the record's type
        InvalidStateError: If the stored last-change trail is partial
    """
    factory = ENTITY_FACTORIES.get(type(record))
    if factory is None:
        raise TypeError(f"No entity factory registered for {type(record).__name__}")
    entity = factory(record)
    logger.debug(f"Loaded {type(entity).__name__} {record.id} from {type(record).__name__}")
    return entity
