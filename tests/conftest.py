"""Shared pytest fixtures.

Provides:
- ``student_store`` / ``class_store``: fresh mock directories, no latency
- ``auth_service``: fresh session table, no latency
- ``criterion_store`` / ``editor``: empty criterion set for "Turma A"
- ``registry``: fresh evaluation workspace registry
- ``client``: httpx AsyncClient against the app with the fixtures above
  injected through ``dependency_overrides``
- ``auth_headers``: Authorization header of a logged-in session
"""

from __future__ import annotations

import os

os.environ.setdefault("SIMULATE_LATENCY", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from services.auth_service import AuthService, get_auth_service  # noqa: E402
from services.class_store import ClassStore, get_class_store  # noqa: E402
from services.criterion_editor import CriterionEditor  # noqa: E402
from services.criterion_store import CriterionStore  # noqa: E402
from services.evaluation_session import (  # noqa: E402
    WorkspaceRegistry,
    get_workspace_registry,
)
from services.student_store import StudentStore, get_student_store  # noqa: E402


@pytest.fixture
def student_store() -> StudentStore:
    """Student directory seeded with the default mock students."""
    return StudentStore()


@pytest.fixture
def class_store(student_store: StudentStore) -> ClassStore:
    """Class directory seeded with Turma A/B/C, wired to ``student_store``."""
    return ClassStore(student_store)


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(ttl_seconds=60)


@pytest.fixture
def criterion_store() -> CriterionStore:
    return CriterionStore("Turma A")


@pytest.fixture
def editor(criterion_store: CriterionStore) -> CriterionEditor:
    return CriterionEditor(criterion_store)


@pytest.fixture
def registry() -> WorkspaceRegistry:
    return WorkspaceRegistry()


@pytest.fixture
async def client(student_store, class_store, auth_service, registry):
    from main import app

    app.dependency_overrides[get_student_store] = lambda: student_store
    app.dependency_overrides[get_class_store] = lambda: class_store
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_workspace_registry] = lambda: registry

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client) -> dict[str, str]:
    resp = await client.post(
        "/api/auth/login",
        json={"email": "prof@escola.com", "password": "secret"},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
