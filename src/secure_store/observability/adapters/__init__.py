from .logging import JsonlLogSink, StdoutLogSink, build_log_sink, emit_log

__all__ = ["JsonlLogSink", "StdoutLogSink", "build_log_sink", "emit_log"]
