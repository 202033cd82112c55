"""Role record factories."""

from ...core.value_objects import ClaimValue, Id
from ...features.roles.entities import Role, RoleClaim, RoleHierarchy
from ..records import RoleClaimRecord, RoleHierarchyRecord, RoleRecord
from .base import entity_info_fields, entity_info_from_record


class RoleRecordFactory:
    @staticmethod
    def create(entity: Role) -> RoleRecord:
        return RoleRecord(
            **entity_info_fields(entity.entity_info),
            name=entity.name,
            description=entity.description,
        )


class RoleFactory:
    @staticmethod
    def create(record: RoleRecord) -> Role:
        return Role.create_from_existing_info(
            entity_info_from_record(record),
            name=record.name,
            description=record.description,
        )


class RoleClaimRecordFactory:
    @staticmethod
    def create(entity: RoleClaim) -> RoleClaimRecord:
        return RoleClaimRecord(
            **entity_info_fields(entity.entity_info),
            role_id=entity.role_id.value,
            claim_id=entity.claim_id.value,
            value=entity.value.value,
        )


class RoleClaimFactory:
    @staticmethod
    def create(record: RoleClaimRecord) -> RoleClaim:
        return RoleClaim.create_from_existing_info(
            entity_info_from_record(record),
            role_id=Id.create_from_existing_info(record.role_id),
            claim_id=Id.create_from_existing_info(record.claim_id),
            value=ClaimValue.create(record.value),
        )


class RoleHierarchyRecordFactory:
    @staticmethod
    def create(entity: RoleHierarchy) -> RoleHierarchyRecord:
        return RoleHierarchyRecord(
            **entity_info_fields(entity.entity_info),
            role_id=entity.role_id.value,
            parent_role_id=entity.parent_role_id.value,
        )


class RoleHierarchyFactory:
    @staticmethod
    def create(record: RoleHierarchyRecord) -> RoleHierarchy:
        return RoleHierarchy.create_from_existing_info(
            entity_info_from_record(record),
            role_id=Id.create_from_existing_info(record.role_id),
            parent_role_id=Id.create_from_existing_info(record.parent_role_id),
        )
