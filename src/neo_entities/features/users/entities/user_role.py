"""User role entity: assigns a role to a user."""

from dataclasses import dataclass

from ....core.entities import EntityInfo, ExecutionContext
from ....core.validation import validate_instance
from ....core.value_objects import Id


@dataclass(frozen=True)
class UserRole:
    entity_info: EntityInfo
    user_id: Id
    role_id: Id

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("user_id", self.user_id, Id, "an Id")
        validate_instance("role_id", self.role_id, Id, "an Id")

    @classmethod
    def register_new(cls, context: ExecutionContext, user_id: Id, role_id: Id) -> "UserRole":
        return cls(EntityInfo.register_new(context), user_id, role_id)

    @classmethod
    def create_from_existing_info(cls, entity_info: EntityInfo, user_id: Id, role_id: Id) -> "UserRole":
        return cls(entity_info, user_id, role_id)
