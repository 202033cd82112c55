"""Claim domain entity.

A claim is a named permission that roles and service clients can be granted.
"""

from dataclasses import dataclass
from typing import Optional

from ....config.settings import get_settings
from ....core.entities import EntityInfo, ExecutionContext, register_entity_change
from ....core.validation import validate_instance, validate_text


@dataclass(frozen=True)
class Claim:
    """Claim domain entity."""

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
    ) -> "Claim":
        """Create a brand-new claim with a fresh envelope."""
        return cls(EntityInfo.register_new(context), name, description)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        name: str,
        description: Optional[str],
    ) -> "Claim":
        """Rebuild a stored claim."""
        return cls(entity_info, name, description)

    def change(self, context: ExecutionContext, name: str, description: Optional[str]) -> "Claim":
        """Rename or re-describe the claim as a versioned change."""
        return register_entity_change(self, context, name=name, description=description)
