"""Custom exception hierarchy for the academic console."""

from errors.exceptions import (
    AuthError,
    ClassNotFoundError,
    ConsoleError,
    CriterionNotFoundError,
    EditorStateError,
    EntityNotFoundError,
    InvalidCredentialsError,
    InvalidSessionError,
    NoClassSelectedError,
    StudentNotFoundError,
    UnknownClassError,
)

__all__ = [
    "AuthError",
    "ClassNotFoundError",
    "ConsoleError",
    "CriterionNotFoundError",
    "EditorStateError",
    "EntityNotFoundError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "NoClassSelectedError",
    "StudentNotFoundError",
    "UnknownClassError",
]
