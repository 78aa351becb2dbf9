"""
Middleware that renders status-bearing errors as normalized JSON responses.
"""

from typing import Any

from fastapi import FastAPI
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from rest_errors.shared.errors import ErrorNormalizer, rest_error_handler_factory
from rest_errors.shared.logging import get_logger

logger = get_logger(__name__)


class _ASGIResponseSink:
    """Response sink over an ASGI connection.

    The normalizer writes synchronously; the response is kept here and
    sent once the normalizer returns.
    """

    def __init__(self, *, headers_sent: bool) -> None:
        self._headers_sent = headers_sent
        self.response: JSONResponse | None = None

    @property
    def headers_sent(self) -> bool:
        return self._headers_sent

    def send_json(self, status_code: int, body: dict[str, Any]) -> None:
        self.response = JSONResponse(status_code=status_code, content=body)
        self._headers_sent = True


def _reraise(error: Any) -> None:
    # The outer pipeline (ServerErrorMiddleware) takes over from here
    raise error


# ==================== Rest Error Middleware ====================


class RestErrorMiddleware:
    """Middleware that normalizes errors raised by routes.

    Exceptions carrying a numeric ``status`` become JSON responses. Other
    exceptions, and any exception raised after the response started, are
    re-raised to the outer middleware.
    """

    def __init__(self, app: ASGIApp, *, normalizer: ErrorNormalizer | None = None) -> None:
        self.app = app
        self.normalizer = normalizer or rest_error_handler_factory()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception as exc:
            sink = _ASGIResponseSink(headers_sent=response_started)
            self.normalizer.handle(exc, sink, _reraise)
            if sink.response is not None:
                logger.debug(
                    "Normalized error response",
                    status_code=sink.response.status_code,
                    path=scope.get("path", ""),
                )
                await sink.response(scope, receive, send)


def setup_exception_handlers(app: FastAPI, *, validate_details: bool | None = None) -> None:
    """Register the error normalizer on a FastAPI application.

    Call it once all routers are included and before any other middleware
    is added: the normalizer must sit right outside the router, with the
    rest of the middleware stack wrapping its responses.

    Args:
        app: FastAPI application instance
        validate_details: Force 422 details validation on or off; None follows settings.
    """
    app.add_middleware(
        RestErrorMiddleware,
        normalizer=rest_error_handler_factory(validate_details=validate_details),
    )
