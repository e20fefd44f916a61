"""Shared FastAPI dependencies — session gate and evaluation workspace lookup."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request

from models.auth import User
from services.auth_service import AuthService, get_auth_service
from services.class_store import ClassStore, get_class_store
from services.evaluation_session import (
    EvaluationWorkspace,
    WorkspaceRegistry,
    get_workspace_registry,
)


@dataclass
class SessionContext:
    """The authenticated caller of a request."""

    token: str
    user: User


def bearer_token(request: Request) -> str:
    return request.headers.get("Authorization", "").removeprefix("Bearer ").strip()


async def get_current_session(
    request: Request,
    auth: AuthService = Depends(get_auth_service),
) -> SessionContext:
    """Resolve the caller from ``Authorization: Bearer <token>``.

    Raises 401 when the header is missing; an unknown or expired token
    surfaces as :class:`InvalidSessionError` (also 401).
    """
    token = bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    return SessionContext(token=token, user=auth.current_user(token))


async def get_workspace(
    session: SessionContext = Depends(get_current_session),
    classes: ClassStore = Depends(get_class_store),
    registry: WorkspaceRegistry = Depends(get_workspace_registry),
) -> EvaluationWorkspace:
    """The caller's evaluation workspace, synced with the class directory."""
    return registry.get_or_create(session.token, classes.directory())
