from __future__ import annotations

import types
from functools import lru_cache
from typing import Any

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from secure_store.errors import SchemaValidationError
from secure_store.ports.schema_validator import SchemaValidator

_TYPING_MODULES = frozenset({"typing", "typing_extensions", "annotated_types"})


class PydanticSchemaValidator(SchemaValidator):
    # Validates values against any pydantic-compatible type: BaseModel, dataclass, TypedDict, hints.
    def validate(self, schema: object, value: object) -> object:
        adapter = _type_adapter(schema)
        try:
            return adapter.validate_python(value)
        except ValidationError as exc:
            raise SchemaValidationError(
                f"value does not match schema {_schema_name(schema)}: {exc.error_count()} error(s)"
            ) from exc
        except PydanticUserError as exc:
            # Deferred schema builds fail here instead of in TypeAdapter().
            raise SchemaValidationError(f"unsupported schema: {schema!r}") from exc


def _type_adapter(schema: object) -> TypeAdapter[Any]:
    # Only types and typing forms are schemas; descriptor mappings and other instances are not.
    if not _is_annotation(schema):
        raise SchemaValidationError(f"unsupported schema: {schema!r}")
    # Adapters are cached for hashable schemas.
    try:
        hash(schema)
    except TypeError:
        return _build_adapter(schema)
    return _cached_adapter(schema)


def _is_annotation(schema: object) -> bool:
    if isinstance(schema, (type, types.GenericAlias, types.UnionType)):
        return True
    return type(schema).__module__ in _TYPING_MODULES


@lru_cache(maxsize=256)
def _cached_adapter(schema: Any) -> TypeAdapter[Any]:
    return _build_adapter(schema)


def _build_adapter(schema: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(schema)
    except PydanticUserError as exc:
        raise SchemaValidationError(f"unsupported schema: {schema!r}") from exc


def _schema_name(schema: object) -> str:
    return getattr(schema, "__name__", repr(schema))
