from __future__ import annotations

import atexit
from datetime import datetime, timezone
import json
import logging
import logging.handlers
import os
from pathlib import Path
import queue
import sys
from typing import Final

_LOGGER_NAME: Final[str] = "crowdin_bridge"
_LOG_DIR_ENV: Final[str] = "CROWDIN_BRIDGE_LOG_DIR"
_LOG_ENABLED_ENV: Final[str] = "CROWDIN_BRIDGE_LOGGING"
_STDERR_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"
_logger: logging.Logger | None = None
_listener: logging.handlers.QueueListener | None = None
_handlers: list[logging.Handler] = []
_atexit_registered = False


def log_path() -> Path | None:
    override = os.environ.get(_LOG_DIR_ENV, "").strip()
    if not override:
        return None
    return Path(override) / "crowdin_bridge.log"


def setup(*, verbose: bool = False) -> None:
    global _logger, _listener, _atexit_registered
    if not _is_enabled():
        return
    if _logger is not None:
        return
    level = logging.DEBUG if verbose else logging.INFO
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
    stream_handler.setLevel(level)
    handlers: list[logging.Handler] = [stream_handler]
    path = log_path()
    if path is not None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError:
            file_handler = None
        if file_handler is not None:
            file_handler.setFormatter(logging.Formatter("%(message)s"))
            file_handler.setLevel(logging.DEBUG)
            handlers.append(file_handler)
    record_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    queue_handler = logging.handlers.QueueHandler(record_queue)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose or path is not None else logging.INFO)
    logger.propagate = False
    logger.addHandler(queue_handler)
    listener = logging.handlers.QueueListener(
        record_queue,
        *handlers,
        respect_handler_level=True,
    )
    listener.start()
    _logger = logger
    _listener = listener
    _handlers[:] = handlers
    if not _atexit_registered:
        atexit.register(shutdown)
        _atexit_registered = True


def shutdown() -> None:
    global _logger, _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
    for handler in _handlers:
        handler.close()
    _handlers.clear()
    if _logger is not None:
        _logger.handlers.clear()
        _logger.propagate = True
        _logger.setLevel(logging.NOTSET)
        _logger = None


def log_event(event: str, **fields: object) -> None:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.isEnabledFor(logging.INFO):
        return
    payload = _base_payload(event)
    if fields:
        payload.update(_sanitize_fields(fields))
    logger.info(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def log_error(event: str, exc: BaseException | None = None, **fields: object) -> None:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.isEnabledFor(logging.ERROR):
        return
    payload = _base_payload(event)
    if exc is not None:
        payload["error_type"] = exc.__class__.__name__
        payload["error"] = str(exc)
    if fields:
        payload.update(_sanitize_fields(fields))
    logger.error(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def _is_enabled() -> bool:
    return os.environ.get(_LOG_ENABLED_ENV, "1").strip() != "0"


def _base_payload(event: str) -> dict[str, object]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        "event": event,
        "pid": os.getpid(),
    }


def _sanitize_fields(fields: dict[str, object]) -> dict[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        else:
            sanitized[key] = str(value)
    return sanitized
