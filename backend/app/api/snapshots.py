"""Admin snapshot trigger router."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
import logging
from sqlalchemy.orm import Session

from app.core.auth import require_admin
from app.core.config import AppConfig, get_config
from app.core.db import get_session
from app.schemas import SnapshotOutcome
from app.services import SnapshotService


router = APIRouter(prefix="/admin/snapshot", tags=["admin"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.post("/run", response_model=SnapshotOutcome)
def run_snapshot(
    db: Session = Depends(get_session),
    config: AppConfig = Depends(get_config),
) -> Dict[str, Any]:
    """Generate a batch now and return the outcome, failure detail included."""
    logger.info("run_snapshot called")
    outcome = SnapshotService(db, config).generate()
    logger.info("run_snapshot done | status=%s count=%s", outcome.status.value, outcome.count)
    return outcome.as_dict()
