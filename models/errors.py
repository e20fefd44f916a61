"""Structured error codes shared by the HTTP layer.

Every error body returned by the API has the shape::

    {"detail": "<human readable>", "code": "<ERROR_CODE>"}
"""

from __future__ import annotations

from enum import Enum

from errors.exceptions import (
    AuthError,
    ConsoleError,
    EditorStateError,
    EntityNotFoundError,
    NoClassSelectedError,
    UnknownClassError,
)


class ErrorCode(str, Enum):
    """Canonical error codes."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"
    UNKNOWN_CLASS = "UNKNOWN_CLASS"
    NO_CLASS_SELECTED = "NO_CLASS_SELECTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def format_error(code: ErrorCode, detail: str) -> str:
    """Format an error as a single line for logs.

    Returns:
        ``{ERROR_CODE}: {detail}``
    """
    return f"{code.value}: {detail}"


# Most specific classes first; the first isinstance match wins.
_STATUS_MAP: list[tuple[type[ConsoleError], int, ErrorCode]] = [
    (EntityNotFoundError, 404, ErrorCode.NOT_FOUND),
    (AuthError, 401, ErrorCode.UNAUTHORIZED),
    (EditorStateError, 409, ErrorCode.INVALID_STATE),
    (NoClassSelectedError, 409, ErrorCode.NO_CLASS_SELECTED),
    (UnknownClassError, 422, ErrorCode.UNKNOWN_CLASS),
]


def classify_error(exc: Exception) -> tuple[int, ErrorCode]:
    """Map a domain exception to an HTTP status and :class:`ErrorCode`.

    Anything outside the console hierarchy is an internal error (500).
    """
    for exc_type, status, code in _STATUS_MAP:
        if isinstance(exc, exc_type):
            return status, code
    if isinstance(exc, ConsoleError):
        return 400, ErrorCode.INVALID_REQUEST
    return 500, ErrorCode.INTERNAL_ERROR


def error_body(exc: Exception) -> tuple[int, dict[str, str]]:
    """Build the ``(status, body)`` pair for an exception."""
    status, code = classify_error(exc)
    detail = str(exc) if status != 500 else "Internal server error"
    return status, {"detail": detail, "code": code.value}
