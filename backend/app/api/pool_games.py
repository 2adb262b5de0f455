"""Admin pool games router."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import require_admin
from app.core.db import get_session
from app.models import PoolGame as PoolGameModel, clamp_int
from app.schemas import PoolGame, PoolGameDelete, PoolGameUpsert
from app.services import PoolGameService


router = APIRouter(prefix="/admin/pool-games", tags=["admin"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[PoolGame])
def list_pool_games(db: Session = Depends(get_session)) -> List[PoolGameModel]:
    return PoolGameService(db).list()


@router.post("/upsert")
def upsert_pool_game(payload: PoolGameUpsert, db: Session = Depends(get_session)) -> Dict[str, bool]:
    try:
        PoolGameService(db).upsert(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except KeyError as exc:
        if str(exc).strip("'") == "pool_game_not_found":
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pool game not found")
        raise
    except SQLAlchemyError:
        logger.exception("Failed to save pool game")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save pool game")
    return {"ok": True}


@router.post("/delete")
def delete_pool_game(payload: PoolGameDelete, db: Session = Depends(get_session)) -> Dict[str, bool]:
    game_id = clamp_int(payload.id, 1, 999999999, 0)
    if not game_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing id")
    try:
        PoolGameService(db).delete(game_id)
    except SQLAlchemyError:
        logger.exception("Failed to delete pool game")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete pool game")
    return {"ok": True}
