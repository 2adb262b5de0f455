from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.main import app
from app.core.auth import TokenStore, get_token_store
from app.core.config import AppConfig, get_config
from app.core.db import get_session


ADMIN_PASSWORD = "s3cret"


class _DummyScheduler:
    def start(self) -> None:  # noqa: D401
        """No-op start."""
        return None

    def shutdown(self) -> None:  # noqa: D401
        """No-op shutdown."""
        return None


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(snapshot_size=12, freshness_hours=2, retention_days=7, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def token_store() -> TokenStore:
    return TokenStore()


@pytest.fixture
def client(
    db_session: Session,
    app_config: AppConfig,
    token_store: TokenStore,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with DB, config, token store and scheduler overrides."""

    def override_get_session() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_config] = lambda: app_config
    app.dependency_overrides[get_token_store] = lambda: token_store

    # Avoid touching the real DB or scheduling during app startup in tests
    monkeypatch.setattr("app.main.init_db", lambda: None, raising=True)
    monkeypatch.setattr("app.main.bootstrap_db", lambda: None, raising=True)
    monkeypatch.setattr("app.main.run_startup_snapshot", lambda config=None: None, raising=True)
    monkeypatch.setattr("app.main.get_scheduler", lambda: _DummyScheduler(), raising=True)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    r = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return {"x-admin-token": r.json()["token"]}
