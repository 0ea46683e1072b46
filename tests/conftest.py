"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from campus.api.deps import get_current_role
from campus.core.config import get_settings
from campus.core.rbac import get_registry


@pytest.fixture(autouse=True)
def reset_cached_state(monkeypatch):
    """Rebuild settings and the registry from a clean environment per test."""
    for var in ("CAMPUS_DEBUG", "CAMPUS_ROLE_TABLE_PATH", "CAMPUS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_registry.cache_clear()


@pytest.fixture
def role_table_yaml(tmp_path):
    """Write a role table file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "roles.yaml"
        path.write_text(content)
        return str(path)
    return _write


@pytest.fixture
def client_as():
    """TestClient factory acting as the given role."""
    from campus.api.main import app

    def _client(role=None) -> TestClient:
        if role is None:
            app.dependency_overrides.pop(get_current_role, None)
        else:
            app.dependency_overrides[get_current_role] = lambda: role
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
