"""Login gate models."""

from __future__ import annotations

from models.base import CamelModel


class User(CamelModel):
    id: int
    name: str
    email: str


class LoginRequest(CamelModel):
    """POST /api/auth/login — request body.

    Fields are optional so that empty credentials reach the service and are
    rejected with the console's own message instead of a schema error.
    """

    email: str = ""
    password: str = ""


class LoginResponse(CamelModel):
    token: str
    user: User
