from __future__ import annotations

import inspect
from functools import cached_property

from secure_store.errors import OverrideContractError

# Capability set every concrete store must supply itself (get/set methods, extended property).
REQUIRED_CAPABILITIES = ("get", "set", "extended")


def missing_capabilities(store_type: type[object]) -> tuple[str, ...]:
    # Members still abstract (inherited unmodified from the base) or of the wrong kind.
    abstract = getattr(store_type, "__abstractmethods__", frozenset())
    missing: list[str] = []
    for name in REQUIRED_CAPABILITIES:
        member = inspect.getattr_static(store_type, name, None)
        if member is None or name in abstract:
            missing.append(name)
            continue
        if name == "extended":
            conforming = isinstance(member, (property, cached_property))
        else:
            conforming = callable(member)
        if not conforming:
            missing.append(name)
    return tuple(missing)


def require_capabilities(store_type: type[object]) -> None:
    if missing_capabilities(store_type):
        raise OverrideContractError(store_type)
