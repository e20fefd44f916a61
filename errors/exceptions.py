"""Domain-specific exceptions for the academic console.

These exceptions let the service and API layers distinguish between
failure modes and answer with the matching HTTP status.  Weight
validation failures are *not* exceptions: the validator returns them as
values and the editor exposes them to the user.
"""

from __future__ import annotations


class ConsoleError(Exception):
    """Base class for all console errors."""


class EntityNotFoundError(ConsoleError):
    """A referenced entity (student, class, criterion) does not exist."""

    entity_type = "entity"

    def __init__(self, entity_id: int | str) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity_type} '{entity_id}' not found")


class StudentNotFoundError(EntityNotFoundError):
    entity_type = "student"


class ClassNotFoundError(EntityNotFoundError):
    entity_type = "class"


class CriterionNotFoundError(EntityNotFoundError):
    entity_type = "criterion"


class AuthError(ConsoleError):
    """Base class for login gate failures."""


class InvalidCredentialsError(AuthError):
    """Login attempted without an e-mail or password."""

    def __init__(self, message: str = "E-mail and password are required") -> None:
        super().__init__(message)


class InvalidSessionError(AuthError):
    """Missing, unknown or expired session token."""

    def __init__(self, message: str = "Invalid or expired session") -> None:
        super().__init__(message)


class EditorStateError(ConsoleError):
    """An editor operation was requested in a state that does not allow it.

    Carries the current state name so callers can report it.
    """

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while editor is {state}")


class UnknownClassError(ConsoleError):
    """The selected class is not part of the class directory."""

    def __init__(self, class_name: str, available: list[str] | None = None) -> None:
        self.class_name = class_name
        self.available = available or []
        super().__init__(f"class '{class_name}' is not in the class directory")


class NoClassSelectedError(ConsoleError):
    """Criterion editing was attempted before any class was selected."""

    def __init__(self) -> None:
        super().__init__("No class selected")
