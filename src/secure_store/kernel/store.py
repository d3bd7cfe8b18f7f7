from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any, ClassVar

from secure_store.domain.metadata import metadata_identity
from secure_store.domain.secure_context import MISSING, require_secure_context
from secure_store.errors import SecureContextError, StoreTypeMismatchError
from secure_store.kernel.contract import require_capabilities
from secure_store.kernel.registry import StoreRegistry, default_registry
from secure_store.observability.adapters.logging import emit_log
from secure_store.observability.domain.logging import SECURE_CONTEXT_REJECTED


class Store(ABC):
    """Identity-scoped value holder guarded by a secure context.

    Constructing a subtype resolves the instance through a registry keyed by the
    metadata identity. The first construction binds the secure context for the
    lifetime of the instance; later constructions with the same identity return
    that instance and ignore their own secure context and schema.

    Subtypes must override ``get``, ``set`` and the ``extended`` property. The
    base implementations of ``get``/``set`` do the guarded storage and are meant
    to be reached through ``super()``. Python re-runs ``__init__`` on every
    construction, including the ones that return an existing instance, so
    subtypes should not keep state set up in ``__init__``.
    """

    registry: ClassVar[StoreRegistry | None] = None

    _metadata: object
    _identity: Hashable
    _secure_context: object
    _schema: object | None
    _registry: StoreRegistry
    _value: object | None
    _has_value: bool
    _value_lock: threading.Lock

    def __init_subclass__(cls, *, registry: StoreRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls.registry = registry

    def __new__(
        cls,
        metadata: object,
        secure_context: object = MISSING,
        schema: object | None = None,
        *,
        registry: StoreRegistry | None = None,
    ) -> Store:
        # Contract first: an incomplete subtype must fail before any registry state exists.
        validate_store_type(cls)
        require_secure_context(secure_context)
        identity = metadata_identity(metadata)
        target = _resolve_registry(cls, registry)

        def _create() -> Store:
            instance = super(Store, cls).__new__(cls)
            instance._bind(
                metadata=metadata,
                identity=identity,
                secure_context=secure_context,
                schema=schema,
                registry=target,
            )
            return instance

        store = target.resolve_or_create(identity, _create)
        if not isinstance(store, cls):
            raise StoreTypeMismatchError(
                f"identity {identity!r} is registered as {type(store).__name__}, not {cls.__name__}"
            )
        return store

    def __init__(
        self,
        metadata: object,
        secure_context: object = MISSING,
        schema: object | None = None,
        *,
        registry: StoreRegistry | None = None,
    ) -> None:
        # State is bound once in __new__; a repeated construction must leave it untouched.
        _ = (metadata, secure_context, schema, registry)

    def _bind(
        self,
        *,
        metadata: object,
        identity: Hashable,
        secure_context: object,
        schema: object | None,
        registry: StoreRegistry,
    ) -> None:
        if "_secure_context" in self.__dict__:
            raise RuntimeError("store is already bound to a secure context")
        self._metadata = metadata
        self._identity = identity
        self._secure_context = secure_context
        self._schema = schema
        self._registry = registry
        self._value = None
        self._has_value = False
        self._value_lock = threading.Lock()

    @property
    def metadata(self) -> object:
        return self._metadata

    @property
    def identity(self) -> Hashable:
        return self._identity

    @property
    def schema(self) -> object | None:
        return self._schema

    @property
    def has_value(self) -> bool:
        return self._has_value

    @abstractmethod
    def get(self, secure_context: object = MISSING) -> object | None:
        # Returns the stored value as last set (same reference, no copy).
        self._authorize(secure_context, operation="get")
        with self._value_lock:
            return self._value

    @abstractmethod
    def set(self, value: object, secure_context: object = MISSING) -> None:
        # Wholesale replacement; no merge with the previous value.
        self._authorize(secure_context, operation="set")
        with self._value_lock:
            self._value = value
            self._has_value = True

    @property
    @abstractmethod
    def extended(self) -> object:
        # Extension point; meaning is supplied entirely by the subtype.
        return None

    def _authorize(self, secure_context: object, *, operation: str) -> None:
        require_secure_context(secure_context)
        # Identity, never equality: a structurally equal token is still a different token.
        if secure_context is not self._secure_context:
            emit_log(
                self._registry.log_sink,
                level="warning",
                message=SECURE_CONTEXT_REJECTED,
                identity=str(self._identity),
                store_type=type(self).__name__,
                operation=operation,
            )
            raise SecureContextError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identity={self._identity!r})"


def validate_store_type(store_type: type[object]) -> None:
    # Usable ahead of construction by wiring code that accepts store types as plugins.
    if not isinstance(store_type, type) or not issubclass(store_type, Store):
        raise TypeError(f"store type must be a Store subclass: {store_type!r}")
    require_capabilities(store_type)


def _resolve_registry(store_type: type[Store], explicit: StoreRegistry | None) -> StoreRegistry:
    # StoreRegistry defines __len__, so an empty registry is falsy: compare with None.
    if explicit is not None:
        return explicit
    if store_type.registry is not None:
        return store_type.registry
    return default_registry()
