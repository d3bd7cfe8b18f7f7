from .adapters import JsonlLogSink, StdoutLogSink, build_log_sink, emit_log
from .domain import LogMessage

__all__ = ["JsonlLogSink", "LogMessage", "StdoutLogSink", "build_log_sink", "emit_log"]
