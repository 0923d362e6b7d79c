"""Tests for structlog configuration."""

import io
import json
import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from todo_api.config import DEFAULTS
from todo_api.logging import configure_logging
from todo_api.main import create_app


@pytest.fixture
def root_stream():
    """A root handler installed before configuration, as the Lambda runtime does."""
    root = logging.getLogger()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    old_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    yield stream
    root.removeHandler(handler)
    root.setLevel(old_level)


def _json_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_level_applied_with_existing_handler(root_stream):
    configure_logging({**DEFAULTS, "log_level": "INFO", "log_format": "json"})

    assert logging.getLogger().level == logging.INFO


def test_json_renderer_on_existing_handler(root_stream):
    configure_logging({**DEFAULTS, "log_level": "INFO", "log_format": "json"})

    structlog.get_logger("todo_api.tests").info("todo_created", todo_id=7)

    events = _json_lines(root_stream)
    assert events[-1]["event"] == "todo_created"
    assert events[-1]["todo_id"] == 7
    assert events[-1]["level"] == "info"
    assert "timestamp" in events[-1]


def test_level_filters_info_events(root_stream):
    configure_logging({**DEFAULTS, "log_level": "WARNING", "log_format": "json"})

    structlog.get_logger("todo_api.tests").info("todo_created", todo_id=7)

    assert root_stream.getvalue() == ""


def test_mutations_are_logged(root_stream, fresh_store):
    client = TestClient(create_app({**DEFAULTS, "log_level": "INFO", "log_format": "json"}))

    todo_id = client.post("/api/todos", json={"name": "log me"}).json()["id"]
    client.put(f"/api/todos/{todo_id}", json={"name": "log me", "isComplete": True})
    client.delete(f"/api/todos/{todo_id}")

    events = [e for e in _json_lines(root_stream) if e.get("todo_id") == todo_id]
    assert [e["event"] for e in events] == ["todo_created", "todo_updated", "todo_deleted"]
