from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoreInfo:
    # Read-only description of a store; never carries the value or the secure context.
    identity: Hashable
    store_type: str
    schema: object | None
    has_value: bool
