from .memory_store import InMemoryStore, SchemaValidatedStore
from .schema_validator import PydanticSchemaValidator

# Public adapter exports make wiring simpler.
__all__ = ["InMemoryStore", "PydanticSchemaValidator", "SchemaValidatedStore"]
