"""Tests for the mock login gate."""

import time

import pytest

from errors.exceptions import InvalidCredentialsError, InvalidSessionError
from services.auth_service import AuthService


class TestLogin:
    async def test_any_non_empty_credentials_accepted(self, auth_service: AuthService):
        resp = await auth_service.login("prof@escola.com", "x")
        assert resp.token.startswith("mock-jwt-token-")
        assert resp.user.name == "prof"
        assert resp.user.email == "prof@escola.com"

    @pytest.mark.parametrize("email,password", [("", "x"), ("a@b.com", ""), ("  ", "x")])
    async def test_missing_credentials(self, auth_service: AuthService, email, password):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(email, password)

    async def test_email_without_local_part_uses_default_name(self, auth_service: AuthService):
        resp = await auth_service.login("@escola.com", "x")
        assert resp.user.name == "Professor"

    async def test_tokens_are_unique(self, auth_service: AuthService):
        first = await auth_service.login("a@b.com", "x")
        second = await auth_service.login("a@b.com", "x")
        assert first.token != second.token
        assert auth_service.size == 2


class TestSessions:
    async def test_validate_token(self, auth_service: AuthService):
        resp = await auth_service.login("a@b.com", "x")
        assert await auth_service.validate_token(resp.token) is True
        assert await auth_service.validate_token("mock-jwt-token-unknown") is False
        assert await auth_service.validate_token("other-token") is False
        assert await auth_service.validate_token("") is False

    async def test_current_user_and_logout(self, auth_service: AuthService):
        resp = await auth_service.login("a@b.com", "x")
        assert auth_service.current_user(resp.token).email == "a@b.com"

        auth_service.logout(resp.token)

        with pytest.raises(InvalidSessionError):
            auth_service.current_user(resp.token)

    async def test_expired_session(self):
        service = AuthService(ttl_seconds=0)
        resp = await service.login("a@b.com", "x")
        time.sleep(0.01)
        assert await service.validate_token(resp.token) is False
        assert service.size == 0

    async def test_cleanup_expired(self):
        service = AuthService(ttl_seconds=0)
        await service.login("a@b.com", "x")
        await service.login("c@d.com", "x")
        time.sleep(0.01)
        assert service.cleanup_expired() == 2
        assert service.size == 0

    async def test_active_tokens_excludes_expired(self):
        service = AuthService(ttl_seconds=0)
        await service.login("a@b.com", "x")
        time.sleep(0.01)
        assert service.active_tokens() == []

    async def test_active_tokens(self, auth_service: AuthService):
        first = await auth_service.login("a@b.com", "x")
        second = await auth_service.login("c@d.com", "x")
        assert auth_service.active_tokens() == [first.token, second.token]
