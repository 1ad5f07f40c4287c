"""Logging setup for libdtf.

Log records go to standard error so the report printed on standard output
stays machine readable.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import threading
import uuid
from datetime import datetime, timezone
from typing import Any

_CONFIG_LOCK = threading.Lock()
_CONFIGURED = False
_CORRELATION_ID = os.getenv("DTF_CORR_ID") or str(uuid.uuid4())

REDACTED = "***REDACTED***"

# Compared documents are often configuration files, so diff values attached to
# log records may carry credentials.
_SECRET_MARKERS = ("token", "secret", "password", "authorization", "api_key")

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "correlation_id"}


def get_correlation_id() -> str:
    """Return the run-scoped correlation identifier."""

    return _CORRELATION_ID


def _looks_secret(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in _SECRET_MARKERS)


def _scrub(value: Any) -> Any:
    if isinstance(value, str):
        return REDACTED if _looks_secret(value) else value
    if isinstance(value, dict):
        return {
            key: REDACTED if isinstance(key, str) and _looks_secret(key) else _scrub(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_scrub(item) for item in value)
    return value


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in vars(record).items() if key not in _RECORD_FIELDS}


class _ContextFilter(logging.Filter):
    """Stamp the correlation id on each record and scrub secret-looking extras."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.correlation_id = _CORRELATION_ID
        for key, value in _extras(record).items():
            setattr(record, key, REDACTED if _looks_secret(key) else _scrub(value))
        if record.args:
            record.args = _scrub(record.args)
        return True


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": record.correlation_id,
        }
        payload.update(_extras(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _TextFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)sZ %(levelname)s %(name)s [corr=%(correlation_id)s] %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        return datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")


class _StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` currently is."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def configure_logging(level_override: str | None = None) -> None:
    """Install the libdtf handler on the root logger once and apply the level.

    The level comes from ``level_override``, else ``DTF_LOG_LEVEL`` on first
    configuration, else ``INFO``.
    """

    global _CONFIGURED

    with _CONFIG_LOCK:
        root = logging.getLogger()
        level_name = level_override
        if not _CONFIGURED:
            handler = _StderrHandler()
            handler.addFilter(_ContextFilter())
            use_json = os.getenv("DTF_LOG_JSON", "false").lower() == "true"
            handler.setFormatter(_JsonFormatter() if use_json else _TextFormatter())
            root.handlers = [handler]
            _CONFIGURED = True
            level_name = level_name or os.getenv("DTF_LOG_LEVEL", "INFO")
        if level_name:
            root.setLevel(getattr(logging, level_name.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a logger after making sure logging is configured."""

    configure_logging()
    return logging.getLogger(name)


__all__ = ["REDACTED", "get_logger", "configure_logging", "get_correlation_id"]
