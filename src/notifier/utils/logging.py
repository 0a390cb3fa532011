"""Logging configuration for the notifier.

Dispatch and the ticket filer log through structlog with key/value pairs.
Per-event context (event id, resource) is carried in contextvars so every
line logged while an event is being dispatched is tagged with it.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def _environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """LOG_LEVEL if set, otherwise a level picked from the environment name."""
    env = (os.getenv("ENV") or _environment()).lower()
    return os.getenv("LOG_LEVEL", _LEVELS.get(env, "INFO"))


def setup_stdlib_logging(log_dir: str = "logs") -> None:
    """Send stdlib logging to stdout and a rotating ``notifier.log``."""
    log_level = get_log_level()

    path = Path(log_dir)
    path.mkdir(exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=path / "notifier.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [logging.StreamHandler(sys.stdout), file_handler]

    # protean logs every repository call at INFO
    logging.getLogger("protean").setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if _environment() in ("production", "staging"):
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.RichTracebackFormatter(max_frames=5))
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs") -> None:
    setup_stdlib_logging(log_dir)
    setup_structlog()


def bind_event_context(**kwargs: Any) -> None:
    """Attach key/values (event_id, resource_id, ...) to every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_event_context() -> None:
    structlog.contextvars.clear_contextvars()
