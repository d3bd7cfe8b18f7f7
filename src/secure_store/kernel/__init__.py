from .contract import REQUIRED_CAPABILITIES, missing_capabilities, require_capabilities
from .registry import StoreRegistry, default_registry
from .store import Store, validate_store_type

# Kernel exports cover the capability contract, the registry and the guarded base store.
__all__ = [
    "REQUIRED_CAPABILITIES",
    "Store",
    "StoreRegistry",
    "default_registry",
    "missing_capabilities",
    "require_capabilities",
    "validate_store_type",
]
