from .loader import ConfigError, load_config, parse_config
from .models import LoggingConfig, RegistryConfig, StoreConfig

# Config exports are intentionally small.
__all__ = ["ConfigError", "LoggingConfig", "RegistryConfig", "StoreConfig", "load_config", "parse_config"]
