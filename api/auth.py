"""Auth API — mock login gate."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import SessionContext, get_current_session
from models.auth import LoginRequest, LoginResponse, User
from services.auth_service import AuthService, get_auth_service
from services.evaluation_session import WorkspaceRegistry, get_workspace_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Open a session.  Any non-empty e-mail/password pair is accepted."""
    return await auth.login(req.email, req.password)


@router.get("/me", response_model=User)
async def me(session: SessionContext = Depends(get_current_session)):
    return session.user


@router.post("/logout")
async def logout(
    session: SessionContext = Depends(get_current_session),
    auth: AuthService = Depends(get_auth_service),
    registry: WorkspaceRegistry = Depends(get_workspace_registry),
):
    """Close the session and drop its unsaved evaluation workspace."""
    registry.discard(session.token)
    auth.logout(session.token)
    return {"status": "ok"}
