from __future__ import annotations

from typing import Protocol, runtime_checkable


# SchemaValidator isolates the validation library from the stores that hold a schema.
@runtime_checkable
class SchemaValidator(Protocol):
    def validate(self, schema: object, value: object) -> object:
        """Return the validated (possibly coerced) value or raise SchemaValidationError."""
        raise NotImplementedError("SchemaValidator is a port; use a concrete adapter.")
