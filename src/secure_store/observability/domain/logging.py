from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOG_LEVELS = ("debug", "info", "warning", "error")

# Event names emitted by registries and stores.
STORE_REGISTERED = "store registered"
STORE_REUSED = "store reused"
STORE_EVICTED = "store evicted"
STORE_DISCARDED = "store discarded"
SECURE_CONTEXT_REJECTED = "secure context rejected"


@dataclass(frozen=True, slots=True)
class LogMessage:
    """Structured store event.

    Identifies the store by identity and type and, for guarded access, the
    operation attempted. Stored values and secure contexts never go in here;
    ``fields`` is for extra scalar context only.
    """

    level: str
    message: str
    identity: str | None = None
    store_type: str | None = None
    operation: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage level must be one of {LOG_LEVELS}, got {self.level!r}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")
        if self.operation is not None and self.operation not in ("get", "set"):
            raise ValueError(f"LogMessage operation must be get or set, got {self.operation!r}")
