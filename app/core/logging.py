"""JSON-lines logging with per-request context.

Each record becomes one JSON object on stdout.  Well-known ``extra``
fields (``event``, ``language``, ``direction`` ...) are copied into the
payload, and :class:`RequestContextFilter` stamps the current
``request_id`` onto every record emitted while a request is in flight,
so a ``language_changed`` line can be joined with its request line.

Usage::

    from app.core.logging import request_id_var, setup_logging
    setup_logging("INFO")
    token = request_id_var.set("abc123")
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Payload order: request context, i18n fields, then timings.
_EXTRA_FIELDS = (
    "event",
    "request_id",
    "path",
    "language",
    "direction",
    "key",
    "missing",
    "status_code",
    "latency_ms",
)


class RequestContextFilter(logging.Filter):
    """Attach ``request_id`` from the context variable unless already set."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object, keeping Arabic text unescaped."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, value)
            for field in _EXTRA_FIELDS
            if (value := getattr(record, field, None)) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(log_level: str = "INFO") -> None:
    """Route the root logger to stdout as JSON lines with request context.

    Args:
        log_level: Minimum log level name (e.g. ``"INFO"``, ``"DEBUG"``).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestContextFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())

    # The request middleware writes its own access line.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
