"""Password history entity.

One entry per password a user has held, used to reject password reuse.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ....core.entities import EntityInfo, ExecutionContext
from ....core.validation import validate_instance
from ....core.value_objects import Id, PasswordHash


@dataclass(frozen=True)
class PasswordHistory:
    """A password hash previously held by ``user_id``."""

    entity_info: EntityInfo
    user_id: Id
    password_hash: PasswordHash
    changed_at: datetime

    def __post_init__(self):
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_instance("user_id", self.user_id, Id, "an Id")
        validate_instance("password_hash", self.password_hash, PasswordHash, "a PasswordHash")
        validate_instance("changed_at", self.changed_at, datetime, "a datetime")

    @classmethod
    def register_new(
        cls,
        context: ExecutionContext,
        user_id: Id,
        password_hash: PasswordHash,
        changed_at: Optional[datetime] = None,
    ) -> "PasswordHistory":
        """Record a password hash; ``changed_at`` defaults to the context clock."""
        if changed_at is None:
            changed_at = context.now()
        return cls(EntityInfo.register_new(context), user_id, password_hash, changed_at)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        user_id: Id,
        password_hash: PasswordHash,
        changed_at: datetime,
    ) -> "PasswordHistory":
        return cls(entity_info, user_id, password_hash, changed_at)
