from __future__ import annotations

from pathlib import Path

from secure_store.config.loader import load_config
from secure_store.config.models import StoreConfig
from secure_store.kernel.registry import StoreRegistry
from secure_store.observability.adapters.logging import build_log_sink


def build_registry(config: StoreConfig) -> StoreRegistry:
    # Wires retention and log sink from a validated config.
    log_sink = build_log_sink(config.logging.sink, path=config.logging.path)
    max_entries = config.registry.max_entries if config.registry.retention == "lru" else None
    return StoreRegistry(max_entries=max_entries, log_sink=log_sink)


def build_registry_from_file(path: Path) -> StoreRegistry:
    return build_registry(load_config(path))
