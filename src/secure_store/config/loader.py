from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from secure_store.config.models import StoreConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> StoreConfig:
    # YAML loader; an empty file yields the defaults.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config is not valid YAML: {path}") from exc
    if raw is None:
        raw = {}
    return parse_config(raw)


def parse_config(raw: object) -> StoreConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return StoreConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
