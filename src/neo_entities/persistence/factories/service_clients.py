"""Service client record factories."""

from ...core.value_objects import ClaimValue, Id
from ...features.service_clients.entities import ServiceClientClaim, ServiceClientScope
from ..records import ServiceClientClaimRecord, ServiceClientScopeRecord
from .base import entity_info_fields, entity_info_from_record


class ServiceClientClaimRecordFactory:
    @staticmethod
    def create(entity: ServiceClientClaim) -> ServiceClientClaimRecord:
        return ServiceClientClaimRecord(
            **entity_info_fields(entity.entity_info),
            service_client_id=entity.service_client_id.value,
            claim_id=entity.claim_id.value,
            value=entity.value.value,
        )


class ServiceClientClaimFactory:
    @staticmethod
    def create(record: ServiceClientClaimRecord) -> ServiceClientClaim:
        return ServiceClientClaim.create_from_existing_info(
            entity_info_from_record(record),
            service_client_id=Id.create_from_existing_info(record.service_client_id),
            claim_id=Id.create_from_existing_info(record.claim_id),
            value=ClaimValue.create(record.value),
        )


class ServiceClientScopeRecordFactory:
    @staticmethod
    def create(entity: ServiceClientScope) -> ServiceClientScopeRecord:
        return ServiceClientScopeRecord(
            **entity_info_fields(entity.entity_info),
            service_client_id=entity.service_client_id.value,
            scope=entity.scope,
        )


class ServiceClientScopeFactory:
    @staticmethod
    def create(record: ServiceClientScopeRecord) -> ServiceClientScope:
        return ServiceClientScope.create_from_existing_info(
            entity_info_from_record(record),
            service_client_id=Id.create_from_existing_info(record.service_client_id),
            scope=record.scope,
        )
