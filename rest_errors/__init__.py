"""Consistent JSON error responses for FastAPI/Starlette applications."""

__version__ = "1.0.0"
