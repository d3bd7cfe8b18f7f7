from secure_store.adapters import InMemoryStore, PydanticSchemaValidator, SchemaValidatedStore
from secure_store.domain import SecureContext, StoreInfo, StoreMetadata
from secure_store.errors import (
    InvalidArgumentError,
    OverrideContractError,
    SchemaValidationError,
    SecureContextError,
    StoreError,
    StoreTypeMismatchError,
)
from secure_store.kernel import Store, StoreRegistry, default_registry, validate_store_type

__all__ = [
    "InMemoryStore",
    "InvalidArgumentError",
    "OverrideContractError",
    "PydanticSchemaValidator",
    "SchemaValidatedStore",
    "SchemaValidationError",
    "SecureContext",
    "SecureContextError",
    "Store",
    "StoreError",
    "StoreInfo",
    "StoreMetadata",
    "StoreRegistry",
    "StoreTypeMismatchError",
    "default_registry",
    "validate_store_type",
]
