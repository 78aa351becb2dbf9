"""Pydantic models for error handling.

Data structures for error response bodies and 422 details.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DetailCode(str, Enum):
    """Reason codes allowed in a 422 details entry.

    already_exists:
        Another resource has the same value as this field. This happens in
        resources that must have some unique key (such as label names).
    invalid:
        The formatting of a field is invalid. The documentation for that
        resource should give more specific information.
    missing:
        A resource does not exist.
    missing_field:
        A required field on a resource has not been set.
    """

    ALREADY_EXISTS = "already_exists"
    INVALID = "invalid"
    MISSING = "missing"
    MISSING_FIELD = "missing_field"


DETAIL_CODES: tuple[str, ...] = tuple(code.value for code in DetailCode)


class ErrorDetail(BaseModel):
    """One validation failure within a 422 response."""

    model_config = ConfigDict(frozen=True)

    code: DetailCode = Field(..., description="Failure reason")
    field: str = Field(..., description="Name of the offending field")
    resource: str = Field(..., description="Resource type the field belongs to")


class MessageResponse(BaseModel):
    """Body of 401, 403, 404, 500 and fallback responses."""

    message: str = Field(..., description="Human readable error message")


class BadRequestDetail(BaseModel):
    """Field-level detail of a 400 response."""

    field: str | None = Field(default=None, description="Bad request field")
    message: str = Field(..., description="Error message relative to this field")


class BadRequestResponse(MessageResponse):
    """Body of a 400 response."""

    details: list[BadRequestDetail] = Field(default_factory=list)


class UnprocessableEntityResponse(BaseModel):
    """Body of a 422 response."""

    message: str | None = Field(default=None, description="Human readable error message")
    details: list[ErrorDetail] = Field(default_factory=list)


# Message written when the error carries none. 422 has no default.
DEFAULT_MESSAGES: dict[int, str] = {
    400: "Invalid request parameter.",
    401: "Invalid credentials",
    403: "Insufficient authority",
    404: "Not Found",
    500: "Internal Server Error",
}
FALLBACK_MESSAGE = ""

_RESPONSE_MODELS: dict[int, tuple[type[BaseModel], str]] = {
    400: (BadRequestResponse, DEFAULT_MESSAGES[400]),
    401: (MessageResponse, DEFAULT_MESSAGES[401]),
    403: (MessageResponse, DEFAULT_MESSAGES[403]),
    404: (MessageResponse, DEFAULT_MESSAGES[404]),
    422: (UnprocessableEntityResponse, "Unprocessable Entity"),
    500: (MessageResponse, DEFAULT_MESSAGES[500]),
}


def rest_error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """Build a FastAPI ``responses=`` mapping documenting normalized error bodies.

    Usage:
        @router.get("/items/{item_id}", responses=rest_error_responses(404, 422))

    Args:
        status_codes: Statuses to document; all known ones when omitted.
    """
    codes = status_codes or tuple(_RESPONSE_MODELS)
    responses: dict[int | str, dict[str, Any]] = {}
    for status_code in codes:
        model, description = _RESPONSE_MODELS.get(status_code, (MessageResponse, ""))
        responses[status_code] = {"model": model, "description": description}
    return responses
