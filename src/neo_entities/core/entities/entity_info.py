"""Entity audit envelope.

``EntityInfo`` is embedded by composition in every persisted entity. It holds
the entity's identity, tenant, optimistic-concurrency version and two audit
trails: creation (always populated) and last change (null as a unit until the
first change).
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional
from uuid import UUID

from .execution_context import ExecutionContext
from ..exceptions import InvalidStateError
from ..validation import validate_instance, validate_text
from ..value_objects import Id, RegistryVersion, TenantInfo
from ...config.constants import AuditFields
from ...config.settings import get_settings
from ...utils.datetime import to_utc, utc_now

logger = logging.getLogger(__name__)


def _validate_audit_stamp(
    prefix: str,
    at: datetime,
    by: str,
    correlation_id: UUID,
    execution_origin: str,
    business_operation_code: str,
) -> None:
    """Validate one audit trail before it is stamped onto an envelope."""
    settings = get_settings()
    validate_instance(f"{prefix}_at", at, datetime, "a datetime")
    validate_text(f"{prefix}_by", by, settings.actor_max_length)
    validate_instance(f"{prefix}_correlation_id", correlation_id, UUID, "a UUID")
    validate_text(f"{prefix}_execution_origin", execution_origin, settings.execution_origin_max_length)
    validate_text(
        f"{prefix}_business_operation_code",
        business_operation_code,
        settings.business_operation_code_max_length,
    )


@dataclass(frozen=True)
class EntityInfo:
    """Identity, tenancy, version and audit trails of an entity.

    Envelopes are immutable values. ``with_change`` and ``register_change``
    return a new envelope and leave the original untouched.
    """

    id: Id
    tenant_info: TenantInfo
    entity_version: RegistryVersion

    # Creation trail
    created_at: datetime
    created_by: str
    created_correlation_id: UUID
    created_execution_origin: str
    created_business_operation_code: str

    # Last-change trail (all None until the first change)
    last_changed_at: Optional[datetime] = None
    last_changed_by: Optional[str] = None
    last_changed_correlation_id: Optional[UUID] = None
    last_changed_execution_origin: Optional[str] = None
    last_changed_business_operation_code: Optional[str] = None

    def __post_init__(self) -> None:
        populated = [name for name in AuditFields.LAST_CHANGE if getattr(self, name) is not None]
        if populated and len(populated) != len(AuditFields.LAST_CHANGE):
            missing = [name for name in AuditFields.LAST_CHANGE if name not in populated]
            raise InvalidStateError(
                "Last-change trail must be fully populated or fully empty; "
                f"populated: {', '.join(populated)}; missing: {', '.join(missing)}",
                details={"populated_fields": populated, "missing_fields": missing},
            )

    @classmethod
    def create_new(
        cls,
        tenant_info: TenantInfo,
        created_by: str,
        correlation_id: UUID,
        execution_origin: str,
        business_operation_code: str,
        now: Optional[datetime] = None,
    ) -> "EntityInfo":
        """Build the envelope of a brand-new entity.

        Generates a new Id and initial version, stamps the creation trail with
        the current time and leaves the last-change trail empty.

        Raises:
            ValidationError: If any creation audit value is missing or too long
        """
        created_at = to_utc(now) if now is not None else utc_now()
        validate_instance("tenant_info", tenant_info, TenantInfo, "a TenantInfo")
        _validate_audit_stamp(
            "created", created_at, created_by, correlation_id,
            execution_origin, business_operation_code,
        )

        entity_info = cls(
            id=Id.generate_new(created_at),
            tenant_info=tenant_info,
            entity_version=RegistryVersion.generate_new(created_at),
            created_at=created_at,
            created_by=created_by,
            created_correlation_id=correlation_id,
            created_execution_origin=execution_origin,
            created_business_operation_code=business_operation_code,
        )
        logger.debug(
            f"Registered new entity {entity_info.id} for tenant {tenant_info.code} "
            f"(operation {business_operation_code})"
        )
        return entity_info

    @classmethod
    def register_new(cls, context: ExecutionContext) -> "EntityInfo":
        """Build a new envelope from an execution context."""
        return cls.create_new(
            tenant_info=context.tenant_info,
            created_by=context.user,
            correlation_id=context.correlation_id,
            execution_origin=context.execution_origin,
            business_operation_code=context.business_operation_code,
            now=context.now(),
        )

    @classmethod
    def create_from_existing_info(
        cls,
        id: Id,
        tenant_info: TenantInfo,
        created_at: datetime,
        created_by: str,
        created_correlation_id: UUID,
        created_execution_origin: str,
        created_business_operation_code: str,
        last_changed_at: Optional[datetime],
        last_changed_by: Optional[str],
        last_changed_correlation_id: Optional[UUID],
        last_changed_execution_origin: Optional[str],
        last_changed_business_operation_code: Optional[str],
        entity_version: RegistryVersion,
    ) -> "EntityInfo":
        """Rebuild a previously persisted envelope verbatim.

        Raises:
            InvalidStateError: If the last-change trail is only partially populated
        """
        return cls(
            id=id,
            tenant_info=tenant_info,
            entity_version=entity_version,
            created_at=created_at,
            created_by=created_by,
            created_correlation_id=created_correlation_id,
            created_execution_origin=created_execution_origin,
            created_business_operation_code=created_business_operation_code,
            last_changed_at=last_changed_at,
            last_changed_by=last_changed_by,
            last_changed_correlation_id=last_changed_correlation_id,
            last_changed_execution_origin=last_changed_execution_origin,
            last_changed_business_operation_code=last_changed_business_operation_code,
        )

    def with_change(
        self,
        changed_by: str,
        correlation_id: UUID,
        execution_origin: str,
        business_operation_code: str,
        new_version: Optional[RegistryVersion] = None,
        now: Optional[datetime] = None,
    ) -> "EntityInfo":
        """Return a copy with the last-change trail populated and the version advanced.

        When ``new_version`` is omitted a fresh version is generated; it is
        always greater than the current one.

        Raises:
            ValidationError: If any change audit value is missing or too long
            InvalidStateError: If ``new_version`` does not advance the version
        """
        changed_at = to_utc(now) if now is not None else utc_now()
        _validate_audit_stamp(
            "last_changed", changed_at, changed_by, correlation_id,
            execution_origin, business_operation_code,
        )

        if new_version is None:
            new_version = RegistryVersion.generate_new(changed_at)
            if new_version <= self.entity_version:
                new_version = RegistryVersion(self.entity_version.value + 1)
        elif new_version <= self.entity_version:
            raise InvalidStateError(
                f"entity_version: new version {new_version} must be greater than {self.entity_version}",
                details={"current_version": self.entity_version.value, "new_version": new_version.value},
            )

        changed = replace(
            self,
            entity_version=new_version,
            last_changed_at=changed_at,
            last_changed_by=changed_by,
            last_changed_correlation_id=correlation_id,
            last_changed_execution_origin=execution_origin,
            last_changed_business_operation_code=business_operation_code,
        )
        logger.debug(
            f"Registered change on entity {self.id}: version {self.entity_version} -> {new_version} "
            f"(operation {business_operation_code})"
        )
        return changed

    def register_change(self, context: ExecutionContext) -> "EntityInfo":
        """Return a copy stamped with a change made under ``context``."""
        return self.with_change(
            changed_by=context.user,
            correlation_id=context.correlation_id,
            execution_origin=context.execution_origin,
            business_operation_code=context.business_operation_code,
            now=context.now(),
        )

    @property
    def tenant_code(self) -> UUID:
        return self.tenant_info.code

    @property
    def has_changes(self) -> bool:
        """Whether the entity was changed since creation."""
        return self.last_changed_at is not None
