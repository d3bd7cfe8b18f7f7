from __future__ import annotations


class StoreError(Exception):
    # Base class for every failure raised by stores and their registry.
    pass


class OverrideContractError(StoreError, TypeError):
    # Raised at construction when a subtype leaves get/set/extended to the base.
    def __init__(self, store_type: type[object]) -> None:
        super().__init__(
            f"{store_type.__name__} requires overriding get() and set() methods "
            "and an overriding get property called extended."
        )
        self.store_type = store_type


class InvalidArgumentError(StoreError, ValueError):
    # Raised for caller-fixable argument problems (secure context shape, metadata identity).
    pass


class SecureContextError(StoreError, PermissionError):
    # Authorization failure: a well-formed secure context that is not the bound one.
    def __init__(self, message: str = "secure context is not valid.") -> None:
        super().__init__(message)


class StoreTypeMismatchError(StoreError, TypeError):
    # Raised when an identity is already registered under an unrelated store type.
    pass


class SchemaValidationError(StoreError, ValueError):
    # Raised when a value does not conform to the store schema.
    pass


INVALID_SECURE_CONTEXT_MESSAGE = "The secure_context argument is missing, None, or not an object."
