"""Admin login router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
import logging

from app.core.auth import TokenStore, check_password, get_token_store
from app.core.config import AppConfig, get_config
from app.schemas import LoginRequest, LoginResponse


router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    config: AppConfig = Depends(get_config),
    store: TokenStore = Depends(get_token_store),
) -> LoginResponse:
    if not check_password(payload.password, config):
        logger.warning("admin_login_rejected")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Wrong password")
    token, expires_at = store.issue(config.admin_token_ttl_min * 60)
    logger.info("admin_login_ok | ttl_min=%s", config.admin_token_ttl_min)
    return LoginResponse(token=token, expiresAt=int(expires_at * 1000))
