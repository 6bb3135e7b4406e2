# This project was developed with assistance from AI tools.
"""Shared fixtures: auth bypass and an app client with a mock DB session."""

import pytest
from db import get_db
from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app


@pytest.fixture(autouse=True)
def _disable_auth(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def make_client():
    """Factory fixture: route ``get_db`` to the given mock session, return TestClient."""

    def _make(session) -> TestClient:
        async def _get_db():
            yield session

        app.dependency_overrides[get_db] = _get_db
        return TestClient(app)

    return _make
