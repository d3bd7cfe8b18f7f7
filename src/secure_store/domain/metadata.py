from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field

from secure_store.errors import InvalidArgumentError

# Metadata shapes accepted as store identity: StoreMetadata, a mapping with "Id"/"id",
# or any object exposing an Id/id attribute.
_IDENTITY_KEYS = ("Id", "id")


@dataclass(frozen=True, slots=True)
class StoreMetadata:
    # Identifies one logical store; only ``id`` takes part in registry lookups.
    id: Hashable
    name: str | None = None
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def Id(self) -> Hashable:
        return self.id


def metadata_identity(metadata: object) -> Hashable:
    """Return the registry key carried by ``metadata``.

    Raises InvalidArgumentError when no identifier is present, when it is empty,
    or when it cannot be used as a mapping key.
    """
    if metadata is None:
        raise InvalidArgumentError("metadata must not be None")

    identity: object = None
    if isinstance(metadata, Mapping):
        for key in _IDENTITY_KEYS:
            if key in metadata:
                identity = metadata[key]
                break
    else:
        for key in _IDENTITY_KEYS:
            identity = getattr(metadata, key, None)
            if identity is not None:
                break

    if identity is None or identity == "":
        raise InvalidArgumentError("metadata must expose a non-empty Id")
    if not isinstance(identity, Hashable):
        raise InvalidArgumentError(f"metadata Id must be hashable, got {type(identity).__name__}")
    try:
        hash(identity)
    except TypeError as exc:
        # Tuples holding unhashable members pass the ABC check above.
        raise InvalidArgumentError("metadata Id must be hashable") from exc
    return identity
