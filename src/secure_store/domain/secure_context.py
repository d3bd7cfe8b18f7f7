from __future__ import annotations

import types

from secure_store.errors import INVALID_SECURE_CONTEXT_MESSAGE, InvalidArgumentError

# Values anyone can rebuild independently (scalars, interned immutables, singletons,
# classes and modules) can never act as capability tokens.
_FORGEABLE_TYPES = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    tuple,
    frozenset,
    range,
    type,
    types.ModuleType,
    type(...),
    type(NotImplemented),
)


class _Missing:
    # Sentinel type for an omitted secure_context argument.
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: object = _Missing()


class SecureContext:
    # Opaque capability token. Equality and hashing are identity-based;
    # any non-scalar object works as a secure context, this class just names the role.
    __slots__ = ("__weakref__", "label")

    def __init__(self, label: str | None = None) -> None:
        self.label = label

    def __repr__(self) -> str:
        if self.label:
            return f"SecureContext({self.label!r})"
        return f"<SecureContext at {id(self):#x}>"


def is_secure_context_shape(candidate: object) -> bool:
    if candidate is None or candidate is MISSING:
        return False
    return not isinstance(candidate, _FORGEABLE_TYPES)


def require_secure_context(candidate: object) -> object:
    # Shape check only; credential matching happens on the bound store.
    if not is_secure_context_shape(candidate):
        raise InvalidArgumentError(INVALID_SECURE_CONTEXT_MESSAGE)
    return candidate
