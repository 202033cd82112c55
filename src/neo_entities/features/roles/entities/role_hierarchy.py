"""Role hierarchy entity: a role inherits the claims of its parent."""

from dataclasses import dataclass

from ....core.entities import EntityInfo, ExecutionContext
from ....core.exceptions import ValidationError
from ....core.validation import validate_instance
from ....core.value_objects import Id


@dataclass(frozen=True)
class RoleHierarchy:
    entity_info: EntityInfo
    role_id: Id
    parent_role_id: Id

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("role_id", self.role_id, Id, "an Id")
        validate_instance("parent_role_id", self.parent_role_id, Id, "an Id")
        if self.role_id == self.parent_role_id:
            raise ValidationError(
                field="parent_role_id",
                rule="self_reference",
                message="parent_role_id: a role cannot be its own parent",
            )

    @classmethod
    def register_new(cls, context: ExecutionContext, role_id: Id, parent_role_id: Id) -> "RoleHierarchy":
        return cls(EntityInfo.register_new(context), role_id, parent_role_id)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        role_id: Id,
        parent_role_id: Id,
    ) -> "RoleHierarchy":
        return cls(entity_info, role_id, parent_role_id)
