"""Service client scope entity.

Scopes are opaque strings (e.g. ``"billing:read"``) a service client may
request in its tokens.
"""

from dataclasses import dataclass

from ....config.settings import get_settings
from ....core.entities import EntityInfo, ExecutionContext
from ....core.validation import validate_instance, validate_text
from ....core.value_objects import Id


@dataclass(frozen=True)
class ServiceClientScope:
    entity_info: EntityInfo
    service_client_id: Id
    scope: str

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("service_client_id", self.service_client_id, Id, "an Id")
        validate_text("scope", self.scope, get_settings().scope_max_length)

    @classmethod
    def register_new(cls, context: ExecutionContext, service_client_id: Id, scope: str) -> "ServiceClientScope":
        return cls(EntityInfo.register_new(context), service_client_id, scope)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        service_client_id: Id,
        scope: str,
    ) -> "ServiceClientScope":
        return cls(entity_info, service_client_id, scope)
