from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import TypeVar

from secure_store.observability.adapters.logging import emit_log
from secure_store.observability.domain.logging import (
    STORE_DISCARDED,
    STORE_EVICTED,
    STORE_REGISTERED,
    STORE_REUSED,
)
from secure_store.ports.log_sink import LogSink

T = TypeVar("T")


class StoreRegistry:
    """Identity-keyed cache of live stores.

    At most one store is registered per identity. Lookups and creation share a
    re-entrant lock so a factory may itself construct other stores.

    With ``max_entries`` unset the cache grows without bound. With a limit, the
    least recently resolved identity is evicted once the cache is full; holders of
    an evicted store keep a working handle, the next construction for that
    identity creates a new instance.
    """

    def __init__(self, *, max_entries: int | None = None, log_sink: LogSink | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be a positive integer")
        self._stores: OrderedDict[Hashable, object] = OrderedDict()
        self._lock = threading.RLock()
        self._max_entries = max_entries
        self._log_sink = log_sink

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    @property
    def log_sink(self) -> LogSink | None:
        return self._log_sink

    def resolve_or_create(self, identity: Hashable, factory: Callable[[], T]) -> T:
        # Check-then-act on the mapping is the critical section for singleton-per-identity.
        with self._lock:
            existing = self._stores.get(identity)
            if existing is not None:
                self._stores.move_to_end(identity)
                self._emit("debug", STORE_REUSED, identity, existing)
                return existing  # type: ignore[return-value]

            created = factory()
            self._stores[identity] = created
            self._emit("info", STORE_REGISTERED, identity, created)
            self._evict_overflow()
            return created

    def lookup(self, identity: Hashable) -> object | None:
        # Plain read; does not refresh LRU order.
        with self._lock:
            return self._stores.get(identity)

    def discard(self, identity: Hashable) -> bool:
        with self._lock:
            removed = self._stores.pop(identity, None)
            if removed is None:
                return False
            self._emit("info", STORE_DISCARDED, identity, removed)
            return True

    def identities(self) -> list[Hashable]:
        with self._lock:
            return list(self._stores)

    def close(self) -> None:
        # Releases the owned log sink; registered stores stay usable but stop logging.
        with self._lock:
            sink, self._log_sink = self._log_sink, None
        if sink is not None:
            sink.close()

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._stores

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def _evict_overflow(self) -> None:
        if self._max_entries is None:
            return
        while len(self._stores) > self._max_entries:
            identity, evicted = self._stores.popitem(last=False)
            self._emit("info", STORE_EVICTED, identity, evicted)

    def _emit(self, level: str, message: str, identity: Hashable, store: object) -> None:
        emit_log(
            self._log_sink,
            level=level,
            message=message,
            identity=str(identity),
            store_type=type(store).__name__,
        )


_DEFAULT_REGISTRY = StoreRegistry()


def default_registry() -> StoreRegistry:
    # Process-wide registry used by store types that do not bind their own.
    return _DEFAULT_REGISTRY
