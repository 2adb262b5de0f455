"""Snapshot generation and rotation.

A snapshot batch is a denormalized copy of a random subset of the enabled
pool, stamped with one shared `created_at`. Public reads serve the rows inside
the freshness window and regenerate lazily when there are none. Rows older
than the retention horizon are pruned on every generation.

Freshness (hours) and retention (days) are independent settings.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import AppConfig, load_config
from app.core.logging import log_event
from app.domain.enums import SnapshotReason, SnapshotStatus
from app.models import GameSnapshot, PoolGame, clamp_int
from app.services.pool_games import PoolGameService
from app.services.sampler import sample
from app.services.site_settings import UPDATED_LABEL_KEY, SiteSettingsService, format_updated_label


logger = logging.getLogger(__name__)

_COPIED_TEXT_FIELDS = ("label", "pola1", "pola2", "pola3", "jam")
_CLOCK_TICK = timedelta(seconds=1)


def _ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware, assuming UTC if naive."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class SnapshotOutcome:
    """Result of one generation: skipped, succeeded(count) or failed."""

    status: SnapshotStatus
    count: int = 0
    reason: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SnapshotStatus.SUCCEEDED

    @classmethod
    def skipped(cls) -> "SnapshotOutcome":
        return cls(status=SnapshotStatus.SKIPPED, reason=SnapshotReason.EMPTY_POOL.value)

    @classmethod
    def succeeded(cls, count: int) -> "SnapshotOutcome":
        return cls(status=SnapshotStatus.SUCCEEDED, count=count)

    @classmethod
    def failed(cls, detail: Optional[str] = None) -> "SnapshotOutcome":
        return cls(status=SnapshotStatus.FAILED, reason=SnapshotReason.STORAGE_ERROR.value, detail=detail)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "ok": self.ok,
            "count": self.count,
            "reason": self.reason,
            "detail": self.detail,
        }


def copy_to_snapshot(game: PoolGame, created_at: datetime) -> GameSnapshot:
    """Build a detached snapshot row from a pool game's display fields."""
    row = GameSnapshot(
        provider=game.provider,
        title=game.title,
        image_url=game.image_url,
        percent=clamp_int(game.percent, 0, 100, 0),
        is_hot=bool(game.is_hot),
        is_new=bool(game.is_new),
        created_at=created_at,
    )
    for name in _COPIED_TEXT_FIELDS:
        setattr(row, name, getattr(game, name) or "")
    return row


class SnapshotStore:
    """Append-only access to `game_snapshots`.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def insert_batch(self, entries: Iterable[PoolGame], created_at: datetime) -> List[GameSnapshot]:
        rows = [copy_to_snapshot(game, created_at) for game in entries]
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def query_recent(
        self,
        within_hours: Optional[int],
        limit: int,
        now: Optional[datetime] = None,
    ) -> List[GameSnapshot]:
        """Most recent rows first; `within_hours=None` ignores freshness."""
        q = self.db.query(GameSnapshot)
        if within_hours is not None:
            cutoff = (now or datetime.now(timezone.utc)) - timedelta(hours=within_hours)
            q = q.filter(GameSnapshot.created_at >= cutoff)
        q = q.order_by(GameSnapshot.created_at.desc(), GameSnapshot.id.asc()).limit(limit)
        return list(q.all())

    def delete_older_than(self, days: int, now: Optional[datetime] = None) -> int:
        cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=days)
        return (
            self.db.query(GameSnapshot)
            .filter(GameSnapshot.created_at < cutoff)
            .delete(synchronize_session=False)
        )

    def latest_created_at(self) -> Optional[datetime]:
        latest = self.db.query(func.max(GameSnapshot.created_at)).scalar()
        return _ensure_tz_aware(latest) if latest is not None else None

    def count(self) -> int:
        return self.db.query(GameSnapshot).count()

    def batch_count(self) -> int:
        return self.db.query(func.count(func.distinct(GameSnapshot.created_at))).scalar() or 0


class SnapshotService:
    """Generator and reader for snapshot batches.

    No lock serializes `generate()`: a scheduler tick racing a cache-miss read
    can commit two batches, and the newer one wins the freshness query.
    """

    def __init__(
        self,
        db: Session,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.db = db
        self.config = config or load_config()
        self.rng = rng
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def batch_size(self) -> int:
        return max(1, self.config.snapshot_size)

    def _next_batch_timestamp(self, store: SnapshotStore, now: datetime) -> datetime:
        # Batches are identified by timestamp, so a coarse clock must not merge two of them.
        # A row further ahead than one tick is clock skew and does not move the stamp.
        latest = store.latest_created_at()
        if latest is not None and now <= latest < now + _CLOCK_TICK:
            return latest + timedelta(microseconds=1)
        return now

    def generate(self) -> SnapshotOutcome:
        """Sample the enabled pool into a new batch, refresh the label, prune.

        Insert, label update and prune commit together or not at all. Storage
        errors are returned as a failed outcome, never raised.
        """
        try:
            pool = PoolGameService(self.db).list_enabled()
        except SQLAlchemyError as exc:
            return self._fail(exc)

        if not pool:
            self.db.rollback()
            log_event(logger, "snapshot_skipped", reason=SnapshotReason.EMPTY_POOL.value)
            return SnapshotOutcome.skipped()

        chosen = sample(pool, self.batch_size, rng=self.rng)
        store = SnapshotStore(self.db)
        try:
            now = _ensure_tz_aware(self._clock())
            created_at = self._next_batch_timestamp(store, now)
            store.insert_batch(chosen, created_at)
            SiteSettingsService(self.db).set(
                UPDATED_LABEL_KEY,
                format_updated_label(now, self.config.timezone),
                commit=False,
            )
            pruned = store.delete_older_than(self.config.retention_days, now=now)
            self.db.commit()
        except SQLAlchemyError as exc:
            return self._fail(exc)

        log_event(
            logger,
            "snapshot_generated",
            count=len(chosen),
            pool_size=len(pool),
            pruned=pruned,
            created_at=created_at.isoformat(),
        )
        return SnapshotOutcome.succeeded(len(chosen))

    def _fail(self, exc: SQLAlchemyError) -> SnapshotOutcome:
        self.db.rollback()
        log_event(
            logger,
            "snapshot_failed",
            level=logging.ERROR,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        logger.exception("Snapshot generation rolled back")
        return SnapshotOutcome.failed(detail=str(exc))

    def current_batch(self) -> List[GameSnapshot]:
        """Rows inside the freshness window, generating once when there are none.

        Returns an empty list instead of raising on storage errors.
        """
        store = SnapshotStore(self.db)
        try:
            rows = store.query_recent(self.config.freshness_hours, self.batch_size, now=self._clock())
            if rows:
                return rows

            log_event(logger, "snapshot_fallback_generate", freshness_hours=self.config.freshness_hours)
            outcome = self.generate()
            if outcome.status is SnapshotStatus.FAILED:
                return []
            return store.query_recent(None, self.batch_size)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Snapshot read failed; serving empty batch")
            return []
