from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class RegistryConfig(BaseModel):
    # Retention policy for the identity -> store cache.
    model_config = ConfigDict(extra="forbid")
    retention: Literal["unbounded", "lru"] = "unbounded"
    max_entries: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_retention(self) -> RegistryConfig:
        if self.retention == "lru" and self.max_entries is None:
            raise ValueError("registry.max_entries is required when retention is lru")
        if self.retention == "unbounded" and self.max_entries is not None:
            raise ValueError("registry.max_entries only applies to lru retention")
        return self


class LoggingConfig(BaseModel):
    # Log sink selection; jsonl needs a file path.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _check_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is jsonl")
        return self


class StoreConfig(BaseModel):
    # Root config document.
    model_config = ConfigDict(extra="forbid")
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
