"""Envelope flattening shared by all record factories.

``entity_info_fields`` spreads an ``EntityInfo`` into record columns and
``entity_info_from_record`` reverses it. Both copy values unchanged; the
last-change trail is carried as a unit.
"""

from typing import Any, Dict

from ...core.entities import EntityInfo
from ...core.value_objects import Id, RegistryVersion, TenantInfo
from ..records import RecordBase


def entity_info_fields(entity_info: EntityInfo) -> Dict[str, Any]:
    """Return the envelope as keyword arguments for a ``RecordBase`` subclass."""
    return {
        "id": entity_info.id.value,
        "tenant_code": entity_info.tenant_info.code,
        "entity_version": entity_info.entity_version.value,
        "created_at": entity_info.created_at,
        "created_by": entity_info.created_by,
        "created_correlation_id": entity_info.created_correlation_id,
        "created_execution_origin": entity_info.created_execution_origin,
        "created_business_operation_code": entity_info.created_business_operation_code,
        "last_changed_at": entity_info.last_changed_at,
        "last_changed_by": entity_info.last_changed_by,
        "last_changed_correlation_id": entity_info.last_changed_correlation_id,
        "last_changed_execution_origin": entity_info.last_changed_execution_origin,
        "last_changed_business_operation_code": entity_info.last_changed_business_operation_code,
    }


def entity_info_from_record(record: RecordBase) -> EntityInfo:
    """Rebuild the envelope stored on ``record``.

    Raises:
        InvalidStateError: If the stored last-change trail is partial
    """
    return EntityInfo.create_from_existing_info(
        id=Id.create_from_existing_info(record.id),
        tenant_info=TenantInfo.create(record.tenant_code),
        created_at=record.created_at,
        created_by=record.created_by,
        created_correlation_id=record.created_correlation_id,
        created_execution_origin=record.created_execution_origin,
        created_business_operation_code=record.created_business_operation_code,
        last_changed_at=record.last_changed_at,
        last_changed_by=record.last_changed_by,
        last_changed_correlation_id=record.last_changed_correlation_id,
        last_changed_execution_origin=record.last_changed_execution_origin,
        last_changed_business_operation_code=record.last_changed_business_operation_code,
        entity_version=RegistryVersion.create_from_existing_info(record.entity_version),
    )
