"""Service client claim entity: the value a service client holds for a claim."""

from dataclasses import dataclass

from ....core.entities import EntityInfo, ExecutionContext, register_entity_change
from ....core.validation import validate_instance
from ....core.value_objects import ClaimValue, Id


@dataclass(frozen=True)
class ServiceClientClaim:
    entity_info: EntityInfo
    service_client_id: Id
    claim_id: Id
    value: ClaimValue

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("service_client_id", self.service_client_id, Id, "an Id")
        validate_instance("claim_id", self.claim_id, Id, "an Id")
        validate_instance("value", self.value, ClaimValue, "a ClaimValue")

    @classmethod
    def register_new(
        cls,
        context: ExecutionContext,
        service_client_id: Id,
        claim_id: Id,
        value: ClaimValue,
    ) -> "ServiceClientClaim":
        return cls(EntityInfo.register_new(context), service_client_id, claim_id, value)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        service_client_id: Id,
        claim_id: Id,
        value: ClaimValue,
    ) -> "ServiceClientClaim":
        return cls(entity_info, service_client_id, claim_id, value)

    def change_value(self, context: ExecutionContext, value: ClaimValue) -> "ServiceClientClaim":
        return register_entity_change(self, context, value=value)
