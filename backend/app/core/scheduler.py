"""APScheduler configuration for snapshot rotation.

Responsibilities:
- Provide a singleton `AsyncIOScheduler` instance
- Run one snapshot generation at startup so a fresh deploy has a batch
- Register the recurring cron trigger; a malformed cron expression is logged
  and the process keeps serving without it
- Expose a cancellation handle for the recurring trigger
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from app.core.config import AppConfig, load_config, resolve_timezone
from app.core.db import get_session_factory
from app.core.logging import log_event
from app.services.snapshots import SnapshotOutcome, SnapshotService


logger = logging.getLogger(__name__)

SNAPSHOT_JOB_ID = "snapshot:generate"

# Global scheduler instance
_scheduler: Optional[AsyncIOScheduler] = None


def get_scheduler(timezone: Optional[str] = None) -> AsyncIOScheduler:
    """Get the global scheduler instance."""
    global _scheduler
    if _scheduler is None:
        tz = resolve_timezone(timezone) if timezone else load_config().timezone
        _scheduler = AsyncIOScheduler(
            timezone=tz,
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
            },
        )
        log_event(logger, "scheduler_created", timezone=tz, coalesce=True, max_instances=1)
    return _scheduler


def _generate(triggered_by: str, config: Optional[AppConfig] = None) -> SnapshotOutcome:
    """Run one generation in its own session. Never raises."""
    log_event(logger, "snapshot_tick_start", triggered_by=triggered_by)
    try:
        db = get_session_factory()()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Snapshot tick could not open a session | triggered_by=%s", triggered_by)
        return SnapshotOutcome.failed(detail=str(exc))
    try:
        outcome = SnapshotService(db, config).generate()
    finally:
        db.close()
    log_event(
        logger,
        "snapshot_tick_done",
        triggered_by=triggered_by,
        status=outcome.status.value,
        count=outcome.count,
        reason=outcome.reason,
    )
    return outcome


def run_startup_snapshot(config: Optional[AppConfig] = None) -> SnapshotOutcome:
    """Generate once at process start (covers the empty-on-deploy case)."""
    return _generate("startup", config)


def scheduled_snapshot_tick() -> None:
    """Entry point for APScheduler on every cron tick."""
    _generate("scheduler")


def schedule_snapshot_job(scheduler: Any, cron_expr: str) -> Optional[Job]:
    """Register the recurring generation trigger.

    Returns the APScheduler job (its `.remove()` cancels the trigger), or None
    when the cron expression is invalid. Invalid cron is logged, not raised.
    """
    if not hasattr(scheduler, "add_job"):
        log_event(logger, "snapshot_job_not_scheduled", reason="scheduler has no add_job", schedule_cron=cron_expr)
        return None

    try:
        trigger = CronTrigger.from_crontab(cron_expr, timezone=getattr(scheduler, "timezone", None))
    except (ValueError, TypeError) as exc:
        log_event(logger, "invalid_cron", level=logging.ERROR, schedule_cron=cron_expr, error=str(exc))
        return None

    job = scheduler.add_job(
        func=scheduled_snapshot_tick,
        trigger=trigger,
        id=SNAPSHOT_JOB_ID,
        name="Snapshot rotation",
        replace_existing=True,
        max_instances=1,
    )
    log_event(logger, "snapshot_job_scheduled", job_id=SNAPSHOT_JOB_ID, schedule_cron=cron_expr)
    return job


def cancel_snapshot_job(scheduler: Any) -> bool:
    """Remove the recurring trigger; True when it was registered."""
    try:
        scheduler.remove_job(SNAPSHOT_JOB_ID)
    except JobLookupError:
        return False
    log_event(logger, "snapshot_job_cancelled", job_id=SNAPSHOT_JOB_ID)
    return True
