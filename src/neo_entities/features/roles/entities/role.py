"""Role domain entity."""

from dataclasses import dataclass
from typing import Optional

from ....config.settings import get_settings
from ....core.entities import EntityInfo, ExecutionContext, register_entity_change
from ....core.validation import validate_instance, validate_text


@dataclass(frozen=True)
class Role:
    """A named set of claims assigned to users.

    Roles form a hierarchy through ``RoleHierarchy`` and carry claim values
    through ``RoleClaim``.
    """

    entity_info: EntityInfo
    name: str
    description: Optional[str] = None

    def __post_init__(self):
        settings = get_settings()
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_text("name", self.name, settings.name_max_length)
        validate_text("description", self.description, settings.description_max_length, required=False)

    @classmethod
    def register_new(
        cls,
        context: ExecutionContext,
        name: str,
        description: Optional[str] = None,
    ) -> "Role":
        """Create a brand-new role with a fresh envelope."""
        return cls(EntityInfo.register_new(context), name, description)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        name: str,
        description: Optional[str],
    ) -> "Role":
        """Rebuild a stored role."""
        return cls(entity_info, name, description)

    def change(self, context: ExecutionContext, name: str, description: Optional[str]) -> "Role":
        return register_entity_change(self, context, name=name, description=description)
