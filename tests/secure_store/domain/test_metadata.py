from __future__ import annotations

import uuid
from types import SimpleNamespace

import pytest

from secure_store.domain.metadata import StoreMetadata, metadata_identity
from secure_store.errors import InvalidArgumentError


def test_identity_from_store_metadata() -> None:
    meta = StoreMetadata(id="ledger", name="Ledger", labels={"team": "core"})
    assert metadata_identity(meta) == "ledger"
    assert meta.Id == "ledger"


def test_identity_from_mapping_prefers_capitalized_key() -> None:
    # Mappings may use either spelling; "Id" is checked first.
    assert metadata_identity({"Id": "a", "id": "b"}) == "a"
    assert metadata_identity({"id": "b"}) == "b"


def test_identity_from_object_attribute() -> None:
    key = uuid.uuid4()
    assert metadata_identity(SimpleNamespace(Id=key)) == key
    assert metadata_identity(SimpleNamespace(id=7)) == 7


@pytest.mark.parametrize(
    "metadata",
    [None, {}, {"Id": ""}, {"Id": None}, SimpleNamespace(name="no id"), {"Id": ["not", "hashable"]}, {"Id": (1, [2])}],
)
def test_identity_rejects_missing_empty_or_unhashable_ids(metadata: object) -> None:
    with pytest.raises(InvalidArgumentError):
        metadata_identity(metadata)
