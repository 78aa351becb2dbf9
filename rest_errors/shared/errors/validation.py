"""Contract checks on the error producer.

A 422 error must describe what went wrong through structured details.
These checks run outside production-like mode and fail loudly: a malformed
422 error is a bug in the code raising it, not something to report to the client.
"""

from collections.abc import Mapping
from typing import Any

from .schemas import DETAIL_CODES


class InvariantError(AssertionError):
    """Raised when an error producer breaks the normalizer contract."""


def invariant(condition: Any, message: str) -> None:
    """Raise :class:`InvariantError` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvariantError(message)


class _Missing:
    """Marker for an attribute the error value does not carry."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_blank(value: Any) -> bool:
    """Whether a message-like value counts as unset (absent, None or "")."""
    return value is None or value is MISSING or value == ""


def read_attr(source: Any, *names: str) -> Any:
    """Read the first present attribute (or mapping key) among ``names``.

    Returns:
        The value, or ``MISSING`` when none of the names is present.
    """
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return MISSING


def _code_value(code: Any) -> Any:
    # DetailCode members compare equal to their value, plain strings pass through
    return getattr(code, "value", code)


def find_detail_violations(details: Any) -> list[str]:
    """Collect every contract violation in a 422 ``details`` value.

    Returns:
        Human readable violations, empty when ``details`` is well formed.
    """
    if isinstance(details, (str, bytes)) or not hasattr(details, "__iter__"):
        return ["Error details must be a sequence."]

    entries = list(details)
    if not entries:
        return ["Error details must be defined."]

    violations: list[str] = []
    for entry in entries:
        code = read_attr(entry, "code")
        if is_blank(code):
            violations.append("Error details.code is missing.")
        if is_blank(read_attr(entry, "field")):
            violations.append("Error details.field is missing.")
        if is_blank(read_attr(entry, "resource")):
            violations.append("Error details.resource is missing.")
        if not is_blank(code) and _code_value(code) not in DETAIL_CODES:
            violations.append(
                f"Received details.code: {_code_value(code)}. "
                f"It must be one of {list(DETAIL_CODES)}."
            )
    return violations


def validate_details(details: Any) -> None:
    """Assert that 422 ``details`` follow the producer contract.

    ``details`` must be non-empty and every entry must carry ``code``,
    ``field`` and ``resource``, with ``code`` one of the ``DetailCode`` values.

    Raises:
        InvariantError: on the first violation found.
    """
    violations = find_detail_violations(details)
    invariant(not violations, violations[0] if violations else "")
