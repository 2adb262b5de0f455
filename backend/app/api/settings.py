"""Admin settings and seed router."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import require_admin
from app.core.config import AppConfig, get_config
from app.core.db import get_session
from app.schemas import SeedResult, SeedStatus
from app.services import SeedService, SiteSettingsService


router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.post("/settings")
def update_settings(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: Session = Depends(get_session),
) -> Dict[str, bool]:
    """Upsert scalar values as text. Non-scalar values are ignored."""
    try:
        written = SiteSettingsService(db).set_many(payload or {})
    except SQLAlchemyError:
        logger.exception("Failed to save settings")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save settings")
    logger.info("settings_saved | keys=%s", ",".join(written))
    return {"ok": True}


@router.get("/seed-status", response_model=SeedStatus)
def seed_status(db: Session = Depends(get_session)) -> Dict[str, int]:
    try:
        return SeedService(db).status()
    except SQLAlchemyError:
        logger.exception("Failed to read seed status")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed")


@router.post("/seed", response_model=SeedResult)
def seed(
    db: Session = Depends(get_session),
    config: AppConfig = Depends(get_config),
) -> Dict[str, Any]:
    try:
        return SeedService(db, config).seed()
    except SQLAlchemyError:
        logger.exception("Seed failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Seed failed")
