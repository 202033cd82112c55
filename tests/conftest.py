"""Pytest configuration and fixtures for neo-entities tests."""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from neo_entities.config.settings import reset_settings
from neo_entities.core.entities import EntityInfo, ExecutionContext
from neo_entities.core.value_objects import Id, RegistryVersion, TenantInfo


FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, 589793, tzinfo=timezone.utc)


@pytest.fixture
def fresh_settings():
    """Drop cached settings around tests that override NEO_ENTITIES_* variables."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_now():
    """Fixed UTC instant used by the test clock."""
    return FIXED_NOW


@pytest.fixture
def tenant_info():
    """Sample tenant."""
    return TenantInfo.create(UUID("0191e1c2-7d3a-7b4e-8f10-1a2b3c4d5e6f"), "Acme")


@pytest.fixture
def execution_context(tenant_info, fixed_now):
    """Execution context with a clock frozen at ``fixed_now``."""
    return ExecutionContext.create(
        tenant_info=tenant_info,
        user="alice@acme.test",
        execution_origin="admin-api",
        business_operation_code="TEST_OPERATION",
        correlation_id=UUID("0191e1c2-7d3a-7000-8000-000000000001"),
        clock=lambda: fixed_now,
    )


@pytest.fixture
def change_context(tenant_info, fixed_now):
    """A later execution context by a different actor, used to change entities."""
    return ExecutionContext.create(
        tenant_info=tenant_info,
        user="bob@acme.test",
        execution_origin="sync-worker",
        business_operation_code="TEST_CHANGE",
        correlation_id=UUID("0191e1c2-7d3a-7000-8000-000000000002"),
        clock=lambda: fixed_now + timedelta(hours=1),
    )


@pytest.fixture
def existing_entity_info(tenant_info, fixed_now):
    """Stored envelope that was never changed."""
    return EntityInfo.create_from_existing_info(
        id=Id.create_from_existing_info(uuid4()),
        tenant_info=tenant_info,
        created_at=fixed_now - timedelta(days=2),
        created_by="creator",
        created_correlation_id=uuid4(),
        created_execution_origin="import-job",
        created_business_operation_code="IMPORT",
        last_changed_at=None,
        last_changed_by=None,
        last_changed_correlation_id=None,
        last_changed_execution_origin=None,
        last_changed_business_operation_code=None,
        entity_version=RegistryVersion.create_from_existing_info(1_700_000_000_000_000),
    )


@pytest.fixture
def changed_entity_info(tenant_info, fixed_now):
    """Stored envelope carrying a full last-change trail."""
    return EntityInfo.create_from_existing_info(
        id=Id.create_from_existing_info(uuid4()),
        tenant_info=tenant_info,
        created_at=fixed_now - timedelta(days=2),
        created_by="creator",
        created_correlation_id=uuid4(),
        created_execution_origin="import-job",
        created_business_operation_code="IMPORT",
        last_changed_at=fixed_now - timedelta(days=1),
        last_changed_by="editor",
        last_changed_correlation_id=uuid4(),
        last_changed_execution_origin="admin-api",
        last_changed_business_operation_code="RENAME",
        entity_version=RegistryVersion.create_from_existing_info(1_700_000_000_000_042),
    )


@pytest.fixture(params=["existing_entity_info", "changed_entity_info"])
def any_entity_info(request):
    """Both stored envelope shapes: with and without a last-change trail."""
    return request.getfixturevalue(request.param)
