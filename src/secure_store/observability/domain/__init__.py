from .logging import (
    LOG_LEVELS,
    SECURE_CONTEXT_REJECTED,
    STORE_DISCARDED,
    STORE_EVICTED,
    STORE_REGISTERED,
    STORE_REUSED,
    LogMessage,
)

__all__ = [
    "LOG_LEVELS",
    "LogMessage",
    "SECURE_CONTEXT_REJECTED",
    "STORE_DISCARDED",
    "STORE_EVICTED",
    "STORE_REGISTERED",
    "STORE_REUSED",
]
