"""User record factories.

``UserStatus`` is persisted by its numeric code; unknown codes on load raise
``InvalidEnumValueError``.
"""

from ...config.constants import UserStatus
from ...core.value_objects import EmailAddress, Id, PasswordHash
from ...features.users.entities import PasswordHistory, User, UserRole
from ..records import PasswordHistoryRecord, UserRecord, UserRoleRecord
from .base import entity_info_fields, entity_info_from_record


class UserRecordFactory:
    @staticmethod
    def create(entity: User) -> UserRecord:
        return UserRecord(
            **entity_info_fields(entity.entity_info),
            username=entity.username,
            email=entity.email.value,
            password_hash=entity.password_hash.value,
            status=entity.status.value,
        )


class UserFactory:
    @staticmethod
    def create(record: UserRecord) -> User:
        return User.create_from_existing_info(
            entity_info_from_record(record),
            username=record.username,
            email=EmailAddress.create(record.email),
            password_hash=PasswordHash.create(record.password_hash),
            status=UserStatus.from_code(record.status),
        )


class UserRoleRecordFactory:
    @staticmethod
    def create(entity: UserRole) -> UserRoleRecord:
        return UserRoleRecord(
            **entity_info_fields(entity.entity_info),
            user_id=entity.user_id.value,
            role_id=entity.role_id.value,
        )


class UserRoleFactory:
    @staticmethod
    def create(record: UserRoleRecord) -> UserRole:
        return UserRole.create_from_existing_info(
            entity_info_from_record(record),
            user_id=Id.create_from_existing_info(record.user_id),
            role_id=Id.create_from_existing_info(record.role_id),
        )


class PasswordHistoryRecordFactory:
    @staticmethod
    def create(entity: PasswordHistory) -> PasswordHistoryRecord:
        return PasswordHistoryRecord(
            **entity_info_fields(entity.entity_info),
            user_id=entity.user_id.value,
            password_hash=entity.password_hash.value,
            changed_at=entity.changed_at,
        )


class PasswordHistoryFactory:
    @staticmethod
    def create(record: PasswordHistoryRecord) -> PasswordHistory:
        return PasswordHistory.create_from_existing_info(
            entity_info_from_record(record),
            user_id=Id.create_from_existing_info(record.user_id),
            password_hash=PasswordHash.create(record.password_hash),
            changed_at=record.changed_at,
        )
