"""Startup wiring: startup generation runs and the cron trigger is registered."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.scheduler import SNAPSHOT_JOB_ID
from app.main import app


class RecordingScheduler:
    def __init__(self) -> None:
        self.jobs: list[dict] = []
        self.started = False
        self.stopped = False

    def add_job(self, **kwargs):  # type: ignore[no-untyped-def]
        self.jobs.append(kwargs)
        return kwargs["id"]

    def start(self) -> None:
        self.started = True

    def shutdown(self) -> None:
        self.stopped = True


@pytest.fixture
def wired(monkeypatch: pytest.MonkeyPatch):
    sched = RecordingScheduler()
    startup_calls: list[object] = []
    monkeypatch.setenv("APP_TIMEZONE", "UTC")
    monkeypatch.setattr("app.main.init_db", lambda: None)
    monkeypatch.setattr("app.main.bootstrap_db", lambda: None)
    monkeypatch.setattr("app.main.run_startup_snapshot", lambda config=None: startup_calls.append(config))
    monkeypatch.setattr("app.main.get_scheduler", lambda: sched)
    return sched, startup_calls


def test_startup_generates_and_schedules(wired, monkeypatch: pytest.MonkeyPatch) -> None:
    sched, startup_calls = wired
    monkeypatch.setenv("SNAPSHOT_CRON", "*/30 * * * *")

    with TestClient(app):
        assert len(startup_calls) == 1
        assert sched.started is True
        assert [job["id"] for job in sched.jobs] == [SNAPSHOT_JOB_ID]
        assert app.state.snapshot_job == SNAPSHOT_JOB_ID

    assert sched.stopped is True


def test_invalid_cron_keeps_serving_without_trigger(wired, monkeypatch: pytest.MonkeyPatch) -> None:
    sched, startup_calls = wired
    monkeypatch.setenv("SNAPSHOT_CRON", "every hour please")

    with TestClient(app):
        assert len(startup_calls) == 1
        assert sched.jobs == []
        assert app.state.snapshot_job is None
        assert sched.started is True
