from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from feedback_api.core.config import Settings
from feedback_api.main import create_app


@pytest.fixture(autouse=True)
def _disable_tracing(monkeypatch):
    monkeypatch.setenv("OTEL_ENABLED", "false")


@pytest.fixture
def feedback_file(tmp_path) -> Path:
    return tmp_path / "feedback.json"


@pytest.fixture
def make_client(feedback_file):
    """Build a fresh app over `feedback_file`; calling it again simulates a restart."""

    def _make(path: Path | None = None, **overrides) -> TestClient:
        settings = Settings(feedback_file=str(path or feedback_file), **overrides)
        return TestClient(create_app(settings))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
