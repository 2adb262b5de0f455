"""Central logging configuration for the backend.

This module configures Python logging with sane defaults and is intended to be
invoked from `app.main` during startup.
"""

from __future__ import annotations

import logging
import os
from typing import Optional


_PROBE_PATHS = ("/api/health", "/metrics")


class HealthCheckFilter(logging.Filter):
    """Filter out health probe and metrics scrape requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(path in message for path in _PROBE_PATHS)


def setup_logging(level: Optional[str] = None) -> None:
    """Initialize application logging.

    - Level is taken from the `LOG_LEVEL` environment variable if not provided.
    - Uses a concise, structured-ish format with timestamps.
    """

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    root_logger = logging.getLogger()

    # Configure handlers once to avoid duplicates in reloads
    if not root_logger.handlers:
        logging.basicConfig(
            level=log_level,
            format=(
                "%(asctime)s | %(levelname)s | %(name)s | "
                "%(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Always align root level (uvicorn may install handlers before we run)
    root_logger.setLevel(log_level)

    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.error").setLevel(log_level)

    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())

    # APScheduler logs every tick at INFO; our own events cover that
    logging.getLogger("apscheduler").setLevel(logging.WARNING)

    # SQLAlchemy: keep quiet by default; detailed SQL is controlled via engine echo
    sqlalchemy_engine_level = logging.DEBUG if root_logger.level == logging.DEBUG else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sqlalchemy_engine_level)


# Avoid reserved LogRecord attribute collisions in `extra`
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "message",
        "asctime",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "args",
    }
)


def log_event(logger: logging.Logger, event_name: str, level: int = logging.INFO, **fields: object) -> None:
    """Emit a log line with text message and structured context via `extra`.

    The message is a concise 'event | k=v ...' line, and the `extra` dict
    carries the same fields for structured handlers.
    """
    if not fields:
        logger.log(level, "%s", event_name, extra={"event": event_name})
        return

    keys = sorted(fields.keys())
    tmpl = " ".join(f"{k}=%s" for k in keys)
    values = tuple(fields[k] for k in keys)

    safe_extra: dict[str, object] = {"event": event_name}
    for k, v in fields.items():
        safe_key = k if k not in _RESERVED_RECORD_KEYS else f"field_{k}"
        safe_extra[safe_key] = v

    logger.log(level, "%s | " + tmpl, event_name, *values, extra=safe_extra)
