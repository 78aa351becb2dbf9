"""Test doubles for the error normalizer.

Usage:
    from rest_errors.tests.factories import RecordingSink, make_error

    sink = RecordingSink()
    normalizer.handle(make_error(404), sink, call_next)
    assert sink.status_code == 404
"""

from types import SimpleNamespace
from typing import Any

from starlette.responses import JSONResponse


class RecordingSink:
    """Response sink that records what the normalizer writes."""

    def __init__(self, *, headers_sent: bool = False) -> None:
        self.headers_sent = headers_sent
        self.status_code: int | None = None
        self.body: dict[str, Any] | None = None
        self.rendered: bytes | None = None
        self.writes = 0

    def send_json(self, status_code: int, body: dict[str, Any]) -> None:
        self.writes += 1
        self.status_code = status_code
        self.body = body
        self.rendered = JSONResponse(status_code=status_code, content=body).body
        self.headers_sent = True


def make_error(status: Any, **attrs: Any) -> SimpleNamespace:
    """Build a plain error-like object with ``status`` and extra attributes."""
    return SimpleNamespace(status=status, **attrs)


def login_detail(code: str = "invalid", **overrides: Any) -> dict[str, Any]:
    """Build a 422 details entry for the Login resource."""
    entry: dict[str, Any] = {"code": code, "field": "username", "resource": "Login"}
    entry.update(overrides)
    return entry
