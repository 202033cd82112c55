"""User domain entity.

Users authenticate with a username or email address and a password hash.
Status codes are persisted, see ``UserStatus``.
"""

import logging
from dataclasses import dataclass

from ....config.constants import UserStatus
from ....config.settings import get_settings
from ....core.entities import EntityInfo, ExecutionContext, register_entity_change
from ....core.exceptions import InvalidEnumValueError
from ....core.validation import validate_instance, validate_text
from ....core.value_objects import EmailAddress, PasswordHash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """User domain entity."""

    entity_info: EntityInfo
    username: str
    email: EmailAddress
    password_hash: PasswordHash
    status: UserStatus = UserStatus.ACTIVE

    def __post_init__(self):
        settings = get_settings()
        validate_instance("entity_info", self.entity_info, EntityInfo, "an EntityInfo")
        validate_text("username", self.username, settings.username_max_length)
        validate_instance("email", self.email, EmailAddress, "an EmailAddress")
        validate_instance("password_hash", self.password_hash, PasswordHash, "a PasswordHash")
        if not isinstance(self.status, UserStatus):
            raise InvalidEnumValueError(
                field="status",
                message=f"status: must be a UserStatus, got {self.status!r}",
            )

    @classmethod
    def register_new(
        cls,
        context: ExecutionContext,
        username: str,
        email: EmailAddress,
        password_hash: PasswordHash,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> "User":
        """Create a brand-new user with a fresh envelope."""
        return cls(EntityInfo.register_new(context), username, email, password_hash, status)

    @classmethod
    def create_from_existing_info(
        cls,
        entity_info: EntityInfo,
        username: str,
        email: EmailAddress,
        password_hash: PasswordHash,
        status: UserStatus,
    ) -> "User":
        """Rebuild a stored user."""
        return cls(entity_info, username, email, password_hash, status)

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    def change_status(self, context: ExecutionContext, status: UserStatus) -> "User":
        """Move the user to ``status`` as a versioned change."""
        changed = register_entity_change(self, context, status=status)
        logger.debug(f"User {self.entity_info.id} status {self.status.name} -> {status.name}")
        return changed

    def change_email(self, context: ExecutionContext, email: EmailAddress) -> "User":
        return register_entity_change(self, context, email=email)

    def change_password_hash(self, context: ExecutionContext, password_hash: PasswordHash) -> "User":
        """Replace the password hash.

        Callers keeping a password history record the previous hash with
        ``PasswordHistory.register_new``.
        """
        return register_entity_change(self, context, password_hash=password_hash)
