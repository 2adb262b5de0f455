"""Health check API router."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.db import get_session

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
def health(db: Session = Depends(get_session)) -> JSONResponse:
    """Health check endpoint; verifies the database answers `SELECT 1`."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check failed")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"ok": False})
    return JSONResponse(content={"ok": True})
