"""Loguru logging shared by the whole package.

Modules get their logger with ``get_logger(__name__)``; the application
calls ``setup_logger()`` once at startup.
"""

from loguru import logger

from .config import InterceptHandler, configure_third_party_loggers, get_logger, setup_logger

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
    "InterceptHandler",
    "configure_third_party_loggers",
]
