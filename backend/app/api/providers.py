"""Admin providers router."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import require_admin
from app.core.db import get_session
from app.models import Provider as ProviderModel
from app.schemas import Provider, ProviderDelete, ProviderUpsert
from app.services import ProviderService


router = APIRouter(prefix="/admin/providers", tags=["admin"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Provider])
def list_providers(db: Session = Depends(get_session)) -> List[ProviderModel]:
    return ProviderService(db).list()


@router.post("/upsert")
def upsert_provider(payload: ProviderUpsert, db: Session = Depends(get_session)) -> Dict[str, bool]:
    try:
        ProviderService(db).upsert(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except SQLAlchemyError:
        logger.exception("Failed to save provider")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save provider")
    return {"ok": True}


@router.post("/delete")
def delete_provider(payload: ProviderDelete, db: Session = Depends(get_session)) -> Dict[str, bool]:
    key = (payload.provider_key or "").strip()
    if not key:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing provider_key")
    try:
        ProviderService(db).delete(key)
    except SQLAlchemyError:
        logger.exception("Failed to delete provider")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete provider")
    return {"ok": True}
