"""Mock login gate — accepts any non-empty credentials.

Issues opaque ``mock-jwt-token-*`` tokens and keeps the resulting
sessions in memory with TTL expiration.  There is no password check and
no signing: this only separates "logged in" from "not logged in".
"""

from __future__ import annotations

import itertools
import logging
import secrets
import time

from pydantic import BaseModel, Field

from errors.exceptions import InvalidCredentialsError, InvalidSessionError
from models.auth import LoginResponse, User
from services.latency import simulate_delay

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = "Professor"


class AuthSession(BaseModel):
    """Server-side state for a logged-in user."""

    token: str
    user: User
    created_at: float = Field(default_factory=time.time)
    updated_at: float = Field(default_factory=time.time)


class AuthService:
    """In-memory session table keyed by token.

    Args:
        ttl_seconds: Idle time after which a session expires.
        token_prefix: Prefix every issued token carries.
        delay: Simulated latency (seconds) for login and token validation.
    """

    def __init__(
        self,
        ttl_seconds: int = 3600,
        token_prefix: str = "mock-jwt-token-",
        delay: float = 0.0,
    ) -> None:
        self._sessions: dict[str, AuthSession] = {}
        self._ttl = ttl_seconds
        self._prefix = token_prefix
        self._delay = delay
        self._counter = itertools.count(1)

    async def login(self, email: str, password: str) -> LoginResponse:
        await simulate_delay(self._delay)
        email = (email or "").strip()
        if not email or not password:
            raise InvalidCredentialsError()

        token = f"{self._prefix}{next(self._counter)}-{secrets.token_hex(5)}"
        user = User(
            id=1,
            name=email.split("@")[0] or DEFAULT_USER_NAME,
            email=email,
        )
        self._sessions[token] = AuthSession(token=token, user=user)
        logger.info("Login for %s", email)
        return LoginResponse(token=token, user=user)

    async def validate_token(self, token: str) -> bool:
        await simulate_delay(self._delay)
        return self._lookup(token) is not None

    def current_user(self, token: str) -> User:
        """Return the user of a live session and refresh its idle timer."""
        session = self._lookup(token)
        if session is None:
            raise InvalidSessionError()
        session.updated_at = time.time()
        return session.user

    def logout(self, token: str) -> None:
        if self._sessions.pop(token, None) is not None:
            logger.info("Session closed")

    def cleanup_expired(self) -> int:
        """Remove all expired sessions.  Returns count removed."""
        now = time.time()
        expired = [t for t, s in self._sessions.items() if (now - s.updated_at) > self._ttl]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.info("Cleaned up %d expired sessions", len(expired))
        return len(expired)

    def active_tokens(self) -> list[str]:
        """Tokens of sessions that have not expired."""
        now = time.time()
        return [t for t, s in self._sessions.items() if (now - s.updated_at) <= self._ttl]

    @property
    def size(self) -> int:
        """Number of sessions currently stored (may include expired)."""
        return len(self._sessions)

    def _lookup(self, token: str) -> AuthSession | None:
        if not token or not token.startswith(self._prefix):
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if (time.time() - session.updated_at) > self._ttl:
            del self._sessions[token]
            logger.debug("Session expired")
            return None
        return session


# ── Module-level Singleton ───────────────────────────────────

_service: AuthService | None = None


def get_auth_service() -> AuthService:
    """Get the singleton auth service."""
    global _service
    if _service is None:
        from config.settings import get_settings

        settings = get_settings()
        _service = AuthService(
            ttl_seconds=settings.session_ttl,
            token_prefix=settings.token_prefix,
            delay=settings.latency_seconds(settings.auth_latency_ms),
        )
    return _service
