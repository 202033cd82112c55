"""Tests for user entities."""

import pytest
from datetime import timedelta
from uuid import uuid4

from neo_entities.config.constants import UserStatus
from neo_entities.core.exceptions import InvalidEnumValueError, RequiredFieldError, ValidationError
from neo_entities.core.value_objects import EmailAddress, Id, PasswordHash
from neo_entities.features.users import PasswordHistory, User, UserRole


@pytest.fixture
def email():
    return EmailAddress.create("alice@acme.test")


@pytest.fixture
def password_hash():
    return PasswordHash.create([1, 2, 3, 4, 5])


class TestUser:
    """Test cases for User."""

    def test_register_new_defaults_to_active(self, execution_context, email, password_hash):
        user = User.register_new(execution_context, "alice", email, password_hash)
        assert user.status is UserStatus.ACTIVE
        assert user.is_active

    def test_create_from_existing_info(self, changed_entity_info, email, password_hash):
        user = User.create_from_existing_info(
            changed_entity_info, "alice", email, password_hash, UserStatus.SUSPENDED
        )
        assert user.status is UserStatus.SUSPENDED
        assert user.password_hash.value == bytes([1, 2, 3, 4, 5])
        assert not user.is_active

    def test_username_is_required(self, existing_entity_info, email, password_hash):
        with pytest.raises(RequiredFieldError) as exc_info:
            User.create_from_existing_info(existing_entity_info, "", email, password_hash, UserStatus.ACTIVE)
        assert exc_info.value.field == "username"

    def test_email_must_be_value_object(self, existing_entity_info, password_hash):
        with pytest.raises(ValidationError) as exc_info:
            User.create_from_existing_info(
                existing_entity_info, "alice", "alice@acme.test", password_hash, UserStatus.ACTIVE
            )
        assert exc_info.value.field == "email"

    def test_password_hash_is_required(self, existing_entity_info, email):
        with pytest.raises(RequiredFieldError) as exc_info:
            User.create_from_existing_info(existing_entity_info, "alice", email, None, UserStatus.ACTIVE)
        assert exc_info.value.field == "password_hash"

    def test_status_must_be_user_status(self, existing_entity_info, email, password_hash):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            User.create_from_existing_info(existing_entity_info, "alice", email, password_hash, 1)
        assert exc_info.value.field == "status"
        assert exc_info.value.rule == "enum"

    def test_change_status(self, existing_entity_info, change_context, email, password_hash):
        user = User.create_from_existing_info(existing_entity_info, "alice", email, password_hash, UserStatus.ACTIVE)
        blocked = user.change_status(change_context, UserStatus.BLOCKED)
        assert blocked.status is UserStatus.BLOCKED
        assert blocked.entity_info.last_changed_by == change_context.user
        assert user.status is UserStatus.ACTIVE

    def test_change_email(self, existing_entity_info, change_context, email, password_hash):
        user = User.create_from_existing_info(existing_entity_info, "alice", email, password_hash, UserStatus.ACTIVE)
        changed = user.change_email(change_context, EmailAddress.create("alice@new.test"))
        assert changed.email.value == "alice@new.test"
        assert changed.entity_info.entity_version > user.entity_info.entity_version

    def test_change_password_hash(self, existing_entity_info, change_context, email, password_hash):
        user = User.create_from_existing_info(existing_entity_info, "alice", email, password_hash, UserStatus.ACTIVE)
        changed = user.change_password_hash(change_context, PasswordHash.create(b"new-digest"))
        assert changed.password_hash.value == b"new-digest"
        assert user.password_hash == password_hash


class TestUserStatus:
    """Persisted status codes never change."""

    @pytest.mark.parametrize(
        "status, code",
        [(UserStatus.ACTIVE, 1), (UserStatus.SUSPENDED, 2), (UserStatus.BLOCKED, 3)],
    )
    def test_codes(self, status, code):
        assert status.value == code
        assert UserStatus.from_code(code) is status

    def test_unknown_code(self):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            UserStatus.from_code(99)
        assert exc_info.value.field == "status"


class TestUserRole:
    """Test cases for UserRole."""

    def test_register_new(self, execution_context):
        user_id, role_id = Id(uuid4()), Id(uuid4())
        user_role = UserRole.register_new(execution_context, user_id, role_id)
        assert user_role.user_id == user_id
        assert user_role.role_id == role_id

    def test_requires_role(self, existing_entity_info):
        with pytest.raises(RequiredFieldError) as exc_info:
            UserRole.create_from_existing_info(existing_entity_info, Id(uuid4()), None)
        assert exc_info.value.field == "role_id"


class TestPasswordHistory:
    """Test cases for PasswordHistory."""

    def test_changed_at_defaults_to_context_clock(self, execution_context, fixed_now, password_hash):
        history = PasswordHistory.register_new(execution_context, Id(uuid4()), password_hash)
        assert history.changed_at == fixed_now

    def test_explicit_changed_at(self, existing_entity_info, fixed_now, password_hash):
        changed_at = fixed_now - timedelta(days=30)
        history = PasswordHistory.create_from_existing_info(
            existing_entity_info, Id(uuid4()), password_hash, changed_at
        )
        assert history.changed_at == changed_at

    def test_requires_changed_at(self, existing_entity_info, password_hash):
        with pytest.raises(RequiredFieldError) as exc_info:
            PasswordHistory.create_from_existing_info(existing_entity_info, Id(uuid4()), password_hash, None)
        assert exc_info.value.field == "changed_at"
