"""Tests for identity, tenancy and version primitives."""

import threading
import uuid
import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from neo_entities.core.exceptions import InvalidFormatError
from neo_entities.core.value_objects import Id, RegistryVersion, TenantInfo
from neo_entities.core.value_objects import identifiers
from neo_entities.utils import generate_uuid_v7
from neo_entities.utils import uuid as uuid_utils
from neo_entities.utils.datetime import from_unix_micros, to_unix_micros


class TestId:
    """Test cases for Id."""

    def test_wraps_existing_uuid(self):
        raw = uuid4()
        assert Id.create_from_existing_info(raw).value == raw

    def test_accepts_uuid_string(self):
        raw = uuid4()
        assert Id.create_from_existing_info(str(raw)).value == raw

    def test_equality_is_by_value(self):
        raw = uuid4()
        assert Id(raw) == Id(raw)
        assert hash(Id(raw)) == hash(Id(raw))
        assert Id(raw) != Id(uuid4())

    def test_rejects_malformed_value(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            Id.create_from_existing_info("not-a-uuid")
        assert exc_info.value.field == "id"

    def test_generated_ids_are_uuid7(self):
        new_id = Id.generate_new()
        assert new_id.value.version == 7

    def test_generated_ids_are_ordered_within_one_millisecond(self, fixed_now, monkeypatch):
        monkeypatch.setattr(uuid_utils, "_last_ms", -1)
        ids = [Id.generate_new(fixed_now) for _ in range(50)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 50

    def test_timestamp_is_embedded(self, fixed_now):
        new_id = Id.generate_new(fixed_now)
        assert abs(new_id.timestamp - fixed_now) < timedelta(milliseconds=2)

    def test_timestamp_is_none_for_non_v7(self):
        assert Id(uuid4()).timestamp is None

    def test_str_is_uuid_string(self):
        raw = uuid4()
        assert str(Id(raw)) == str(raw)


class TestUuidV7:
    """Test cases for UUIDv7 generation."""

    def test_unique_across_threads(self):
        results = []
        lock = threading.Lock()

        def worker():
            batch = [generate_uuid_v7() for _ in range(200)]
            with lock:
                results.extend(batch)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(results)) == len(results) == 1600

    def test_variant_bits(self):
        value = generate_uuid_v7()
        assert value.variant == uuid.RFC_4122

    def test_clock_ids_stay_ordered_after_counter_overflow(self, monkeypatch):
        # Counter overflow has pushed the last timestamp ahead of the clock
        ahead_ms = to_unix_micros(datetime.now(timezone.utc)) // 1000 + 60_000
        monkeypatch.setattr(uuid_utils, "_last_ms", ahead_ms)
        monkeypatch.setattr(uuid_utils, "_last_counter", 7)

        ids = [generate_uuid_v7() for _ in range(20)]

        assert ids == sorted(ids)
        assert all(value.int >> 80 == ahead_ms for value in ids)

    def test_explicit_older_timestamp_is_kept(self, fixed_now, monkeypatch):
        monkeypatch.setattr(uuid_utils, "_last_ms", to_unix_micros(fixed_now) // 1000 + 60_000)
        value = generate_uuid_v7(fixed_now)
        assert value.int >> 80 == to_unix_micros(fixed_now) // 1000

    def test_naive_timestamp_is_read_as_utc(self, fixed_now):
        naive = fixed_now.replace(tzinfo=None)
        assert generate_uuid_v7(naive).int >> 80 == to_unix_micros(fixed_now) // 1000
        assert Id.generate_new(naive).timestamp == Id.generate_new(fixed_now).timestamp


class TestTenantInfo:
    """Test cases for TenantInfo."""

    def test_equality_ignores_name(self):
        code = uuid4()
        assert TenantInfo.create(code, "Acme") == TenantInfo.create(code, "Other")
        assert hash(TenantInfo.create(code, "Acme")) == hash(TenantInfo.create(code))

    def test_different_codes_are_different_tenants(self):
        assert TenantInfo.create(uuid4()) != TenantInfo.create(uuid4())

    def test_with_name_returns_new_instance(self):
        tenant = TenantInfo.create(uuid4())
        named = tenant.with_name("Acme")
        assert tenant.name is None
        assert named.name == "Acme"
        assert named.code == tenant.code

    def test_str(self):
        code = UUID("0191e1c2-7d3a-7b4e-8f10-1a2b3c4d5e6f")
        assert str(TenantInfo.create(code)) == str(code)
        assert str(TenantInfo.create(code, "Acme")) == f"Acme ({code})"

    def test_rejects_malformed_code(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            TenantInfo.create(12345)
        assert exc_info.value.field == "tenant_code"


class TestRegistryVersion:
    """Test cases for RegistryVersion."""

    def test_wraps_existing_integer(self):
        assert RegistryVersion.create_from_existing_info(42).value == 42

    def test_wraps_existing_timestamp(self, fixed_now):
        version = RegistryVersion.create_from_existing_info(fixed_now)
        assert version.value == to_unix_micros(fixed_now)
        assert version.as_datetime() == fixed_now

    def test_equality_and_ordering(self):
        assert RegistryVersion(5) == RegistryVersion(5)
        assert RegistryVersion(5) < RegistryVersion(6)
        assert int(RegistryVersion(7)) == 7

    @pytest.mark.parametrize("value", [True, 1.5, "10", None])
    def test_rejects_non_integer(self, value):
        with pytest.raises(InvalidFormatError) as exc_info:
            RegistryVersion(value)
        assert exc_info.value.field == "entity_version"

    def test_generated_versions_strictly_increase(self, fixed_now):
        # Same clock reading every time: versions must still advance
        versions = [RegistryVersion.generate_new(fixed_now) for _ in range(100)]
        assert all(a < b for a, b in zip(versions, versions[1:]))

    def test_generated_version_tracks_clock(self, fixed_now, monkeypatch):
        monkeypatch.setattr(identifiers, "_last_version", 0)
        assert RegistryVersion.generate_new(fixed_now).value == to_unix_micros(fixed_now)


class TestUnixMicros:
    """Test cases for microsecond conversion helpers."""

    def test_round_trip_is_exact(self, fixed_now):
        assert from_unix_micros(to_unix_micros(fixed_now)) == fixed_now

    def test_naive_datetime_is_treated_as_utc(self):
        naive = datetime(2025, 1, 1, 12, 0, 0)
        aware = naive.replace(tzinfo=timezone.utc)
        assert to_unix_micros(naive) == to_unix_micros(aware)
