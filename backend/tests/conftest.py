"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("TODO_API_ENVIRONMENT", "development")
os.environ.setdefault("TODO_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("TODO_API_LOG_LEVEL", "WARNING")


@pytest.fixture
def fresh_store():
    """Start every test from an empty in-memory store."""
    from todo_api.database import reset_engine

    reset_engine()
    yield
    reset_engine()


@pytest.fixture
def client(fresh_store):
    """FastAPI test client."""
    from fastapi.testclient import TestClient
    from todo_api.main import app

    return TestClient(app, raise_server_exceptions=True)


@pytest.fixture
def make_todo(client):
    """Create a Todo through the API and return its JSON representation."""

    def _make(name: str | None = "walk dog", is_complete: bool = False) -> dict:
        resp = client.post("/api/todos", json={"name": name, "isComplete": is_complete})
        assert resp.status_code == 201
        return resp.json()

    return _make
