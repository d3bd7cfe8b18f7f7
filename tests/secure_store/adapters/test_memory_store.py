from __future__ import annotations

import uuid

import pytest
from pydantic import BaseModel

from secure_store.adapters.memory_store import InMemoryStore, SchemaValidatedStore
from secure_store.domain.metadata import StoreMetadata
from secure_store.domain.secure_context import SecureContext
from secure_store.domain.store_info import StoreInfo
from secure_store.errors import InvalidArgumentError, SchemaValidationError, SecureContextError
from secure_store.kernel.registry import StoreRegistry


class _Profile(BaseModel):
    name: str
    age: int


@pytest.fixture
def registry() -> StoreRegistry:
    return StoreRegistry()


def _meta() -> StoreMetadata:
    return StoreMetadata(id=uuid.uuid4().hex)


def test_in_memory_store_roundtrip_and_extended_info(registry: StoreRegistry) -> None:
    # extended describes the store without exposing its value.
    ctx = SecureContext()
    meta = _meta()
    store = InMemoryStore(meta, ctx, {"data": "object"}, registry=registry)
    assert store.extended == StoreInfo(
        identity=meta.id,
        store_type="InMemoryStore",
        schema={"data": "object"},
        has_value=False,
    )

    store.set({"data": "Data1"}, ctx)
    assert store.get(ctx) == {"data": "Data1"}
    assert store.extended.has_value is True


def test_schema_validated_store_stores_validated_model(registry: StoreRegistry) -> None:
    # The validator output is what gets stored, so mappings become model instances.
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, _Profile, registry=registry)
    store.set({"name": "Ada", "age": "36"}, ctx)
    stored = store.get(ctx)
    assert isinstance(stored, _Profile)
    assert stored.age == 36


def test_schema_validated_store_rejects_invalid_value_and_keeps_previous(registry: StoreRegistry) -> None:
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, _Profile, registry=registry)
    store.set({"name": "Ada", "age": 36}, ctx)
    with pytest.raises(SchemaValidationError):
        store.set({"name": "Ada"}, ctx)
    assert store.get(ctx) == _Profile(name="Ada", age=36)


def test_schema_validated_store_accepts_type_hints(registry: StoreRegistry) -> None:
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, list[int], registry=registry)
    store.set(["1", 2], ctx)
    assert store.get(ctx) == [1, 2]
    with pytest.raises(SchemaValidationError):
        store.set(["x"], ctx)


def test_schema_validated_store_without_schema_accepts_anything(registry: StoreRegistry) -> None:
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, registry=registry)
    payload = object()
    store.set(payload, ctx)
    assert store.get(ctx) is payload


def test_schema_validated_store_checks_credentials_before_validating(registry: StoreRegistry) -> None:
    # Unauthorized or malformed callers see credential errors, never schema errors.
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, _Profile, registry=registry)
    with pytest.raises(SecureContextError):
        store.set({"bad": "payload"}, SecureContext())
    with pytest.raises(InvalidArgumentError):
        store.set({"bad": "payload"}, None)


def test_base_type_request_returns_registered_subtype(registry: StoreRegistry) -> None:
    meta = _meta()
    ctx = SecureContext()
    validated = SchemaValidatedStore(meta, ctx, _Profile, registry=registry)
    assert InMemoryStore(meta, ctx, registry=registry) is validated


def test_schema_validated_store_reports_descriptor_mapping_schema(registry: StoreRegistry) -> None:
    # A plain descriptor mapping cannot validate values; set fails with a store error and stores nothing.
    ctx = SecureContext()
    store = SchemaValidatedStore(_meta(), ctx, {"data": "object"}, registry=registry)
    with pytest.raises(SchemaValidationError):
        store.set({"data": "Data1"}, ctx)
    assert store.get(ctx) is None
    assert store.has_value is False
