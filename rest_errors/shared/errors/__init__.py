"""Shared errors package.

Normalization of status-bearing errors into consistent JSON responses.
"""

from .domain import (
    BadRequestError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    RestError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from .normalizer import (
    ErrorNormalizer,
    NormalizedError,
    ResponseSink,
    error_status,
    normalize_error,
    rest_error_handler_factory,
)
from .schemas import (
    DEFAULT_MESSAGES,
    DETAIL_CODES,
    BadRequestDetail,
    BadRequestResponse,
    DetailCode,
    ErrorDetail,
    MessageResponse,
    UnprocessableEntityResponse,
    rest_error_responses,
)
from .validation import InvariantError, invariant, is_blank, validate_details

__all__ = [
    # Domain errors
    "RestError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableEntityError",
    "InternalServerError",
    # Normalizer
    "ErrorNormalizer",
    "NormalizedError",
    "ResponseSink",
    "error_status",
    "normalize_error",
    "rest_error_handler_factory",
    # Validation
    "InvariantError",
    "invariant",
    "is_blank",
    "validate_details",
    # Schemas
    "DEFAULT_MESSAGES",
    "DETAIL_CODES",
    "DetailCode",
    "ErrorDetail",
    "MessageResponse",
    "BadRequestDetail",
    "BadRequestResponse",
    "UnprocessableEntityResponse",
    "rest_error_responses",
]
