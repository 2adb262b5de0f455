"""Public read API used by the landing page."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import AppConfig, get_config
from app.core.db import get_session
from app.models import GameSnapshot as GameSnapshotModel, Provider as ProviderModel
from app.schemas import GameSnapshot, PublicProvider
from app.services import ProviderService, SiteSettingsService, SnapshotService


router = APIRouter(tags=["public"])
logger = logging.getLogger(__name__)


@router.get("/settings", response_model=Dict[str, str])
def get_settings(db: Session = Depends(get_session)) -> Dict[str, str]:
    try:
        return SiteSettingsService(db).all()
    except SQLAlchemyError:
        logger.exception("Failed to read settings")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to read settings")


@router.get("/providers", response_model=List[PublicProvider])
def list_providers(db: Session = Depends(get_session)) -> List[ProviderModel]:
    try:
        return ProviderService(db).list(enabled_only=True)
    except SQLAlchemyError:
        logger.exception("Failed to read providers")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to read providers")


@router.get("/games", response_model=List[GameSnapshot])
def current_games(
    db: Session = Depends(get_session),
    config: AppConfig = Depends(get_config),
) -> List[GameSnapshotModel]:
    """Current snapshot batch; an empty list is a normal response."""
    return SnapshotService(db, config).current_batch()
