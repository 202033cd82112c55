"""Role claim entity: the value a role holds for a claim."""

from dataclasses import dataclass

from ....core.entities import EntityInfo, ExecutionContext, register_entity_change
from ....core.validation import validate_instance
from ....core.value_objects import ClaimValue, Id


@dataclass(frozen=True)
class RoleClaim:
    """Grants, denies or inherits ``claim_id`` for ``role_id``."""

    entity_info: EntityInfo
    role_id: Id
    claim_id: Id
    value: ClaimValue

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("role_id", self.role_id, Id, "an Id")
        validate_instance("claim_id", self.claim_id, Id, "an Id")
        validate_instance("value", self.value, ClaimValue, "a ClaimValue")

    @classmethod
    def register_new(cls, context: ExecutionContext, role_id: Id, claim_id: Id, value: ClaimValue) -> "RoleClaim":
        return cls(EntityInfo.register_new(context), role_id, claim_id, value)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        role_id: Id,
        claim_id: Id,
        value: ClaimValue,
    ) -> "RoleClaim":
        return cls(entity_info, role_id, claim_id, value)

    def change_value(self, context: ExecutionContext, value: ClaimValue) -> "RoleClaim":
        """Set a new claim value as a versioned change."""
        return register_entity_change(self, context, value=value)
