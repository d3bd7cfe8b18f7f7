from __future__ import annotations

from typing import ClassVar

from secure_store.adapters.schema_validator import PydanticSchemaValidator
from secure_store.domain.secure_context import MISSING
from secure_store.domain.store_info import StoreInfo
from secure_store.kernel.store import Store
from secure_store.ports.schema_validator import SchemaValidator


class InMemoryStore(Store):
    # Reference store: keeps the value in process memory behind the base guard.
    def get(self, secure_context: object = MISSING) -> object | None:
        return super().get(secure_context)

    def set(self, value: object, secure_context: object = MISSING) -> None:
        super().set(value, secure_context)

    @property
    def extended(self) -> StoreInfo:
        return StoreInfo(
            identity=self.identity,
            store_type=type(self).__name__,
            schema=self.schema,
            has_value=self.has_value,
        )


class SchemaValidatedStore(InMemoryStore):
    """In-memory store that validates every value against its schema before storing it.

    The validated value (as returned by the validator) is what gets stored, so a
    pydantic model schema turns incoming mappings into model instances. A rejected
    value raises SchemaValidationError and the previous value stays in place. A
    store created without a schema accepts any value.
    """

    validator: ClassVar[SchemaValidator] = PydanticSchemaValidator()

    def set(self, value: object, secure_context: object = MISSING) -> None:
        # Credential errors take precedence over schema errors.
        self._authorize(secure_context, operation="set")
        if self.schema is not None:
            value = self.validator.validate(self.schema, value)
        super().set(value, secure_context)
