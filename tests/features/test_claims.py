"""Tests for claim entities."""

import dataclasses
import pytest
from uuid import uuid4

from neo_entities.core.exceptions import RequiredFieldError, ValidationError, ValueOutOfRangeError
from neo_entities.core.value_objects import Id
from neo_entities.features.claims import Claim, ClaimDependency


class TestClaim:
    """Test cases for Claim."""

    def test_register_new(self, execution_context):
        claim = Claim.register_new(execution_context, "users:read", "Read users")
        assert claim.name == "users:read"
        assert claim.description == "Read users"
        assert claim.entity_info.created_by == execution_context.user
        assert not claim.entity_info.has_changes

    def test_description_is_optional(self, existing_entity_info):
        claim = Claim.create_from_existing_info(existing_entity_info, "claim-name", None)
        assert claim.description is None
        assert claim.entity_info is existing_entity_info

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_name_is_required(self, existing_entity_info, name):
        with pytest.raises(RequiredFieldError) as exc_info:
            Claim.create_from_existing_info(existing_entity_info, name, None)
        assert exc_info.value.field == "name"
        assert "name" in str(exc_info.value)

    def test_name_is_required_for_new_claims(self, execution_context):
        with pytest.raises(RequiredFieldError):
            Claim.register_new(execution_context, "")

    def test_description_max_length(self, existing_entity_info):
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            Claim.create_from_existing_info(existing_entity_info, "claim-name", "x" * 1001)
        assert exc_info.value.field == "description"

    def test_name_max_length_is_configurable(self, existing_entity_info, monkeypatch, fresh_settings):
        from neo_entities.config.settings import reset_settings

        monkeypatch.setenv("NEO_ENTITIES_NAME_MAX_LENGTH", "5")
        reset_settings()
        with pytest.raises(ValueOutOfRangeError):
            Claim.create_from_existing_info(existing_entity_info, "claim-name", None)

    def test_change_is_versioned(self, existing_entity_info, change_context):
        claim = Claim.create_from_existing_info(existing_entity_info, "claim-name", None)
        changed = claim.change(change_context, "claim-renamed", "Now described")

        assert changed.name == "claim-renamed"
        assert changed.description == "Now described"
        assert changed.entity_info.last_changed_by == change_context.user
        assert changed.entity_info.entity_version > claim.entity_info.entity_version
        assert changed.entity_info.id == claim.entity_info.id
        assert claim.name == "claim-name"

    def test_change_revalidates(self, existing_entity_info, change_context):
        claim = Claim.create_from_existing_info(existing_entity_info, "claim-name", None)
        with pytest.raises(RequiredFieldError):
            claim.change(change_context, "", None)

    def test_fields_are_immutable(self, existing_entity_info):
        claim = Claim.create_from_existing_info(existing_entity_info, "claim-name", None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            claim.name = "other"


class TestClaimDependency:
    """Test cases for ClaimDependency."""

    def test_register_new(self, execution_context):
        claim_id, depends_on = Id(uuid4()), Id(uuid4())
        dependency = ClaimDependency.register_new(execution_context, claim_id, depends_on)
        assert dependency.claim_id == claim_id
        assert dependency.depends_on_claim_id == depends_on

    def test_rejects_self_dependency(self, existing_entity_info):
        claim_id = Id(uuid4())
        with pytest.raises(ValidationError) as exc_info:
            ClaimDependency.create_from_existing_info(existing_entity_info, claim_id, claim_id)
        assert exc_info.value.rule == "self_reference"
        assert exc_info.value.field == "depends_on_claim_id"

    def test_requires_ids(self, existing_entity_info):
        with pytest.raises(RequiredFieldError) as exc_info:
            ClaimDependency.create_from_existing_info(existing_entity_info, None, Id(uuid4()))
        assert exc_info.value.field == "claim_id"

    def test_rejects_raw_uuid(self, existing_entity_info):
        with pytest.raises(ValidationError) as exc_info:
            ClaimDependency.create_from_existing_info(existing_entity_info, uuid4(), Id(uuid4()))
        assert exc_info.value.rule == "type"
