"""Claim record factories."""

from ...core.value_objects import Id
from ...features.claims.entities import Claim, ClaimDependency
from ..records import ClaimDependencyRecord, ClaimRecord
from .base import entity_info_fields, entity_info_from_record


class ClaimRecordFactory:
    @staticmethod
    def create(entity: Claim) -> ClaimRecord:
        return ClaimRecord(
            **entity_info_fields(entity.entity_info),
            name=entity.name,
            description=entity.description,
        )


class ClaimFactory:
    @staticmethod
    def create(record: ClaimRecord) -> Claim:
        return Claim.create_from_existing_info(
            entity_info_from_record(record),
            name=record.name,
            description=record.description,
        )


class ClaimDependencyRecordFactory:
    @staticmethod
    def create(entity: ClaimDependency) -> ClaimDependencyRecord:
        return ClaimDependencyRecord(
            **entity_info_fields(entity.entity_info),
            claim_id=entity.claim_id.value,
            depends_on_claim_id=entity.depends_on_claim_id.value,
        )


class ClaimDependencyFactory:
    @staticmethod
    def create(record: ClaimDependencyRecord) -> ClaimDependency:
        return ClaimDependency.create_from_existing_info(
            entity_info_from_record(record),
            claim_id=Id.create_from_existing_info(record.claim_id),
            depends_on_claim_id=Id.create_from_existing_info(record.depends_on_claim_id),
        )
