from __future__ import annotations

import json
from pathlib import Path

from secure_store.observability.domain.logging import LogMessage
from secure_store.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Compact JSON line per message on stdout.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str))

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends one JSON object per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def build_log_sink(kind: str, *, path: str | None = None) -> LogSink | None:
    # Factory used by config wiring; "none" disables logging.
    if kind == "none":
        return None
    if kind == "stdout":
        return StdoutLogSink()
    if kind == "jsonl":
        if not isinstance(path, str) or not path:
            raise ValueError("jsonl log sink requires a non-empty path")
        return JsonlLogSink(Path(path))
    raise ValueError(f"Unknown log sink kind: {kind}")


def emit_log(
    sink: LogSink | None,
    *,
    level: str,
    message: str,
    identity: str | None = None,
    store_type: str | None = None,
    operation: str | None = None,
    fields: dict[str, object] | None = None,
) -> None:
    # Logging must never break a store operation; sink failures are dropped.
    if sink is None:
        return
    try:
        sink.emit(
            LogMessage(
                level=level,
                message=message,
                identity=identity,
                store_type=store_type,
                operation=operation,
                fields={} if fields is None else dict(fields),
            )
        )
    except Exception:
        return


def log_to_dict(message: LogMessage) -> dict[str, object]:
    payload: dict[str, object] = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
    }
    # Store attributes are omitted when unset so registry-wide events stay compact.
    for key in ("identity", "store_type", "operation"):
        value = getattr(message, key)
        if value is not None:
            payload[key] = value
    if message.fields:
        payload["fields"] = message.fields
    return payload
