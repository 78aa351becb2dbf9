"""
Shared module - cross-cutting concerns and utilities.

This module provides shared functionality used across the application:
- Error normalization
- Logging utilities with Loguru
"""

from .logging import get_logger, logger, setup_logger

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
]
