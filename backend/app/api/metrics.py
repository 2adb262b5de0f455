"""Prometheus metrics endpoint.

Exposes plain-text Prometheus metrics at `/metrics` without external deps.

Metrics:
- pool_games_total{enabled}
- snapshot_rows_total
- snapshot_batches_total
- snapshot_last_batch_timestamp
"""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.db import get_session
from app.models import PoolGame as PoolGameModel
from app.services import SnapshotStore


router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_class=PlainTextResponse)
def metrics(db: Session = Depends(get_session)) -> str:
    """Serve Prometheus metrics built from the database state."""
    pool_counts: Dict[bool, int] = {
        bool(enabled): count
        for enabled, count in (
            db.query(PoolGameModel.enabled, func.count()).group_by(PoolGameModel.enabled).all()
        )
    }

    store = SnapshotStore(db)
    latest = store.latest_created_at()

    lines: list[str] = []

    lines.append("# HELP pool_games_total Number of pool games by enabled flag")
    lines.append("# TYPE pool_games_total gauge")
    for flag in (True, False):
        label = "true" if flag else "false"
        lines.append(f'pool_games_total{{enabled="{label}"}} {int(pool_counts.get(flag, 0))}')

    lines.append("# HELP snapshot_rows_total Number of stored snapshot rows")
    lines.append("# TYPE snapshot_rows_total gauge")
    lines.append(f"snapshot_rows_total {store.count()}")

    lines.append("# HELP snapshot_batches_total Number of stored snapshot batches")
    lines.append("# TYPE snapshot_batches_total gauge")
    lines.append(f"snapshot_batches_total {store.batch_count()}")

    lines.append("# HELP snapshot_last_batch_timestamp Unix timestamp of the newest batch")
    lines.append("# TYPE snapshot_last_batch_timestamp gauge")
    lines.append(f"snapshot_last_batch_timestamp {latest.timestamp() if latest else 0.0}")

    return "\n".join(lines) + "\n"
