"""Claim dependency entity: granting one claim requires another."""

from dataclasses import dataclass

from ....core.entities import EntityInfo, ExecutionContext
from ....core.exceptions import ValidationError
from ....core.validation import validate_instance
from ....core.value_objects import Id


@dataclass(frozen=True)
class ClaimDependency:
    """Links ``claim_id`` to the claim it depends on."""

    entity_info: EntityInfo
    claim_id: Id
    depends_on_claim_id: Id

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("claim_id", self.claim_id, Id, "an Id")
        validate_instance("depends_on_claim_id", self.depends_on_claim_id, Id, "an Id")
        if self.claim_id == self.depends_on_claim_id:
            raise ValidationError(
                field="depends_on_claim_id",
                rule="self_reference",
                message="depends_on_claim_id: a claim cannot depend on itself",
            )

    @classmethod
    def register_new(cls, context: ExecutionContext, claim_id: Id, depends_on_claim_id: Id) -> "ClaimDependency":
        return cls(EntityInfo.register_new(context), claim_id, depends_on_claim_id)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        claim_id: Id,
        depends_on_claim_id: Id,
    ) -> "ClaimDependency":
        return cls(entity_info, claim_id, depends_on_claim_id)
