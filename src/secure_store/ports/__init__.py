from .log_sink import LogSink
from .schema_validator import SchemaValidator

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "SchemaValidator"]
