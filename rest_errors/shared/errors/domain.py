"""Standard error types raised by request handlers.

Each type carries the attributes the error normalizer reads:
``status`` plus the optional fields of its status family.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from rest_errors.shared.logging import get_logger

from .schemas import DEFAULT_MESSAGES, FALLBACK_MESSAGE, ErrorDetail

logger = get_logger(__name__)


class RestError(Exception):
    """Base class for errors rendered as normalized JSON responses.

    ``message`` stays ``None`` unless given, so the normalizer applies the
    default of the status family. ``default_message`` mirrors that default
    for ``str(exc)`` and logs.
    """

    status: int = 500
    default_message: str = DEFAULT_MESSAGES[500]

    def __init__(self, message: str | None = None, *, status: int | None = None) -> None:
        if status is not None:
            self.status = status
            self.default_message = DEFAULT_MESSAGES.get(status, FALLBACK_MESSAGE)
        self.message = message
        super().__init__(message or self.default_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, message={self.message!r})"


class BadRequestError(RestError):
    """Invalid request parameter."""

    status = 400
    default_message = DEFAULT_MESSAGES[400]

    def __init__(
        self,
        field: str | None = None,
        field_message: str | None = None,
        message: str | None = None,
    ) -> None:
        self.field = field
        self.field_message = field_message
        super().__init__(message)


class UnauthorizedError(RestError):
    """Authentication required or failed."""

    status = 401
    default_message = DEFAULT_MESSAGES[401]


class ForbiddenError(RestError):
    """Access denied - insufficient permissions."""

    status = 403
    default_message = DEFAULT_MESSAGES[403]


class NotFoundError(RestError):
    """Resource not found."""

    status = 404
    default_message = DEFAULT_MESSAGES[404]


class UnprocessableEntityError(RestError):
    """Request understood but semantically invalid.

    ``details`` entries may be :class:`ErrorDetail` models or mappings with
    ``code``, ``field`` and ``resource``. Mappings that do not validate are
    kept as given so the normalizer's contract check reports them.
    """

    status = 422
    default_message = "Unprocessable Entity"

    def __init__(
        self,
        details: Iterable[ErrorDetail | Mapping[str, Any]] = (),
        message: str | None = None,
    ) -> None:
        self.details = [self._coerce_detail(entry) for entry in details]
        super().__init__(message)

    @staticmethod
    def _coerce_detail(entry: ErrorDetail | Mapping[str, Any]) -> ErrorDetail | Mapping[str, Any]:
        if isinstance(entry, ErrorDetail):
            return entry
        try:
            return ErrorDetail.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Invalid 422 detail entry {entry!r}: {e.error_count()} error(s)")
            return entry


class InternalServerError(RestError):
    """Unexpected server-side failure."""

    status = 500
    default_message = DEFAULT_MESSAGES[500]
