"""Logging setup: request-scoped ids and raw payload logging."""

from __future__ import annotations

import contextvars
import logging
import uuid

from medrecords.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s request_id=%(request_id)s"
MAX_LOGGED_BODY_CHARS = 2048

request_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)

_configured = False


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being handled."""

    def filter(self, record: logging.LogRecord) -> bool:
        current = getattr(record, "request_id", None)
        record.request_id = current or request_id_var.get() or "-"
        return True


def bind_request_id(header_value: str | None) -> str:
    """Use the caller's X-Request-Id when given, otherwise mint one."""
    request_id = (header_value or "").strip() or str(uuid.uuid4())
    request_id_var.set(request_id)
    return request_id


def log_raw_body(logger: logging.Logger, label: str, raw: bytes) -> None:
    """Log a captured payload verbatim at DEBUG, truncated for very large bodies."""
    if not settings.log_raw_bodies or not logger.isEnabledFor(logging.DEBUG):
        return
    text = raw.decode("utf-8", errors="replace")
    if len(text) > MAX_LOGGED_BODY_CHARS:
        text = f"{text[:MAX_LOGGED_BODY_CHARS]}... ({len(raw)} bytes)"
    logger.debug("%s: %s", label, text)


def configure_logging() -> None:
    """Configure process-wide logging once."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.addFilter(RequestIdFilter())
    _configured = True
