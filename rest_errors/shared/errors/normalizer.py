"""Error normalizer.

Turns a status-bearing error into one of a small, fixed set of JSON bodies:

    400 -> {"message", "details": [{"field", "message"}]}
    401, 403, 404, 500 and any other status -> {"message"}
    422 -> {"message", "details": [{"code", "field", "resource"}]}

Anything that is not an object with a numeric ``status`` is left to the
next handler in the pipeline.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from numbers import Number
from typing import Any, Protocol

from fastapi.encoders import jsonable_encoder

from rest_errors.core.config import get_settings
from rest_errors.shared.logging import get_logger

from .schemas import DEFAULT_MESSAGES, FALLBACK_MESSAGE
from .validation import MISSING, find_detail_violations, is_blank, read_attr, validate_details

logger = get_logger(__name__)

# Detail message for a 400 error that does not name its field
BLANK_FIELD_MESSAGE = "Request parameter is invalid"


class ResponseSink(Protocol):
    """Where a normalized error is written."""

    @property
    def headers_sent(self) -> bool:
        """Whether a response has already started on this sink."""
        ...

    def send_json(self, status_code: int, body: dict[str, Any]) -> None:
        """Write ``body`` as a JSON response with ``status_code``."""
        ...


@dataclass(frozen=True, slots=True)
class NormalizedError:
    """Status code and JSON-ready body of a normalized error."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


def error_status(error: Any) -> int | None:
    """Return the HTTP status carried by ``error``, or None if it has none.

    Scalars are not objects and never carry a status. The status must be a
    number (bools excluded); integral floats are accepted as their int value.
    """
    if error is None or isinstance(error, (str, bytes, bytearray, Number)):
        return None
    status = read_attr(error, "status")
    if isinstance(status, bool) or not isinstance(status, (int, float)):
        return None
    if isinstance(status, float):
        if not status.is_integer():
            return None
        return int(status)
    return status


def _message(error: Any, default: str) -> Any:
    message = read_attr(error, "message")
    return default if is_blank(message) else message


def _bad_request_body(error: Any) -> dict[str, Any]:
    field_name = read_attr(error, "field")
    field_message = read_attr(error, "field_message", "fieldMessage")

    detail: dict[str, Any] = {}
    if field_name is not MISSING:
        detail["field"] = field_name
    if not is_blank(field_message):
        detail["message"] = field_message
    elif not is_blank(field_name):
        detail["message"] = f"{field_name} is invalid"
    else:
        detail["message"] = BLANK_FIELD_MESSAGE

    return {
        "message": _message(error, DEFAULT_MESSAGES[400]),
        "details": [detail],
    }


def _unprocessable_body(error: Any, *, validate: bool) -> dict[str, Any]:
    details = read_attr(error, "details")
    if details is MISSING or details is None:
        details = []
    elif isinstance(details, Iterable) and not isinstance(details, (str, bytes, Mapping)):
        details = list(details)

    if validate:
        validate_details(details)
    else:
        violations = find_detail_violations(details)
        if violations:
            logger.warning(
                "Passing malformed 422 details through",
                violations=violations,
                error_type=type(error).__name__,
            )

    body: dict[str, Any] = {}
    message = read_attr(error, "message")
    if message is not MISSING:
        body["message"] = message
    body["details"] = details
    return body


def normalize_error(error: Any, *, validate: bool = True) -> NormalizedError | None:
    """Map an error-like value to its normalized status and JSON body.

    Args:
        error: Any value; only objects exposing a numeric ``status`` are mapped.
        validate: Check 422 ``details`` against the producer contract.

    Returns:
        The normalized error, or None when ``error`` is not recognized.

    Raises:
        InvariantError: ``validate`` is set and a 422 error has malformed details.
    """
    status = error_status(error)
    if status is None:
        return None

    match status:
        case 400:
            body = _bad_request_body(error)
        case 401 | 403 | 404 | 500:
            body = {"message": _message(error, DEFAULT_MESSAGES[status])}
        case 422:
            body = _unprocessable_body(error, validate=validate)
        case _:
            body = {"message": _message(error, FALLBACK_MESSAGE)}

    return NormalizedError(status_code=status, body=jsonable_encoder(body))


class ErrorNormalizer:
    """Terminal error handler of a request pipeline.

    Writes a normalized JSON response for recognized errors and hands
    everything else, including errors raised after the response started,
    to ``call_next``.
    """

    def __init__(self, *, validate_details: bool | None = None) -> None:
        self._validate_details = validate_details

    @property
    def validates_details(self) -> bool:
        """Whether 422 details are checked; follows settings unless forced."""
        if self._validate_details is not None:
            return self._validate_details
        return get_settings().validate_error_details

    def normalize(self, error: Any) -> NormalizedError | None:
        """Normalize ``error`` with this handler's validation mode."""
        return normalize_error(error, validate=self.validates_details)

    def handle(
        self,
        error: Any,
        response: ResponseSink,
        call_next: Callable[[Any], Any],
    ) -> Any:
        """Write the normalized response for ``error`` or delegate to ``call_next``."""
        if response.headers_sent:
            logger.debug(
                "Response already started, delegating error",
                error_type=type(error).__name__,
            )
            return call_next(error)

        normalized = self.normalize(error)
        if normalized is None:
            logger.debug(
                "Error carries no numeric status, delegating",
                error_type=type(error).__name__,
            )
            return call_next(error)

        response.send_json(normalized.status_code, normalized.body)
        return None

    __call__ = handle


def rest_error_handler_factory(*, validate_details: bool | None = None) -> ErrorNormalizer:
    """Return the error handler to register as the last stage of a pipeline.

    Args:
        validate_details: Force 422 details validation on or off; None
            resolves it from settings on every call.
    """
    return ErrorNormalizer(validate_details=validate_details)
