from .metadata import StoreMetadata, metadata_identity
from .secure_context import MISSING, SecureContext, is_secure_context_shape, require_secure_context
from .store_info import StoreInfo

__all__ = [
    "MISSING",
    "SecureContext",
    "StoreInfo",
    "StoreMetadata",
    "is_secure_context_shape",
    "metadata_identity",
    "require_secure_context",
]
