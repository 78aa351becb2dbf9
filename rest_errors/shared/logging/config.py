"""Loguru setup.

Two output modes, picked by ``LOG_FORMAT``:
- ``console``: colored, human readable lines for development
- ``json``: one JSON object per line on stdout, sensitive extras redacted

Records from the standard ``logging`` module (uvicorn, fastapi) are
forwarded to Loguru so everything leaves the process in one format.
"""

from __future__ import annotations

import inspect
import json
import logging
import re
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from rest_errors.core.config import Settings

REDACTED = "***REDACTED***"

# Extra keys whose values never reach the output
SENSITIVE_KEYS = re.compile(
    r"(password|token|secret|key|auth|credential)",
    re.IGNORECASE,
)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Standard library loggers routed through Loguru, with their minimum level
STDLIB_LOGGERS: dict[str, int] = {
    "": logging.INFO,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
    "fastapi": logging.INFO,
}


def _get_settings() -> Settings:
    from rest_errors.core.config import get_settings

    return get_settings()


class InterceptHandler(logging.Handler):
    """Forward standard ``logging`` records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so Loguru reports the real caller
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _json_line(record: dict[str, Any], service: str) -> str:
    """Render a Loguru record as one JSON line."""
    extra = record["extra"]
    entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "service": service,
        "module": extra.get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        "message": record["message"],
    }
    entry.update(
        (key, REDACTED if SENSITIVE_KEYS.search(key) else value)
        for key, value in extra.items()
        if key != "name" and key not in entry
    )

    exception = record["exception"]
    if exception is not None:
        entry["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    return json.dumps(entry, ensure_ascii=False, default=str) + "\n"


def _json_sink(service: str) -> Any:
    def sink(message: Any) -> None:
        sys.stdout.write(_json_line(message.record, service))
        sys.stdout.flush()

    return sink


def setup_logger() -> None:
    """Replace Loguru's default sink according to the logging settings."""
    settings = _get_settings()
    level = settings.logging.level.upper()
    as_json = settings.logging.format.lower() == "json"

    logger.remove()
    logger.configure(extra={"name": settings.app.name})

    if as_json:
        logger.add(_json_sink(settings.app.name), level=level, backtrace=True, diagnose=False)
    else:
        logger.add(
            sys.stdout,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=True,
            backtrace=True,
            diagnose=settings.app.debug,
        )

    configure_third_party_loggers(quiet_access_log=as_json)

    logger.info("Logger configured", log_level=level, log_format="json" if as_json else "console")


def configure_third_party_loggers(*, quiet_access_log: bool = False) -> None:
    """Route the standard library loggers in ``STDLIB_LOGGERS`` through Loguru.

    Args:
        quiet_access_log: Only let warnings through from ``uvicorn.access``.
    """
    logging.root.handlers = []

    for name, level in STDLIB_LOGGERS.items():
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler()]
        stdlib_logger.propagate = False
        stdlib_logger.setLevel(level)

    if quiet_access_log:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str):
    """Get a Loguru logger bound to ``name`` (usually ``__name__``)."""
    return logger.bind(name=name)
