from __future__ import annotations

import os
from uuid import uuid4

# Settings are read at import time; tests default to an in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("API_KEY", "test-api-key")

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.security import API_KEY_HEADER
from app.db.session import create_db_engine
from app.db.store import Store
from app.main import create_app
from tests.testkit import ApiClient, RunIds


@pytest.fixture
def store() -> Store:
    s = Store(create_db_engine(settings.model_copy(update={"DATABASE_URL": "sqlite://"})))
    s.ensure_schema()
    yield s
    s.dispose()


@pytest.fixture
def client(store: Store):
    with TestClient(create_app(store=store)) as c:
        c.headers[API_KEY_HEADER] = settings.API_KEY
        yield c


@pytest.fixture(scope="session")
def api() -> ApiClient:
    if os.getenv("RUN_API_INTEGRATION", "0") != "1":
        pytest.skip("Integration tests disabled. Set RUN_API_INTEGRATION=1.")

    base_url = os.getenv("TEST_API_BASE_URL", "http://localhost:3000")
    client = ApiClient(base_url, api_key=os.getenv("TEST_API_KEY", settings.API_KEY))
    try:
        health = client.call("GET", "/health")
    except Exception as exc:  # pragma: no cover - guard rail
        pytest.fail(f"API not reachable at {base_url}: {exc}")
    if not isinstance(health, dict) or not health.get("ok"):
        pytest.fail(f"Invalid health check at {base_url}: {health}")
    return client


@pytest.fixture(scope="session")
def run_ids() -> RunIds:
    return RunIds(uuid4().hex[:8])
