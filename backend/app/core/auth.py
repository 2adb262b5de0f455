"""Shared-password admin login with an in-memory expiring token map.

Tokens live only in process memory; a restart logs every admin out. Expired
tokens are dropped lazily when they are looked up.
"""

from __future__ import annotations

import hmac
import logging
import secrets
import threading
import time
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from app.core.config import AppConfig


logger = logging.getLogger(__name__)


class TokenStore:
    """Process-wide map of opaque token -> expiry (unix seconds)."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._tokens: dict[str, float] = {}
        self._lock = threading.Lock()

    def issue(self, ttl_seconds: int) -> tuple[str, float]:
        token = secrets.token_hex(24)
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._tokens[token] = expires_at
        return token, expires_at

    def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            expires_at = self._tokens.get(token)
            if expires_at is None:
                return False
            if self._clock() > expires_at:
                del self._tokens[token]
                return False
        return True

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


_token_store: Optional[TokenStore] = None


def get_token_store() -> TokenStore:
    """Get the global token store instance."""
    global _token_store
    if _token_store is None:
        _token_store = TokenStore()
    return _token_store


def check_password(candidate: Optional[str], config: AppConfig) -> bool:
    """Compare a login attempt against `ADMIN_PASSWORD`.

    An unset password never matches, so an unconfigured deployment has no admin.
    """
    if not config.admin_password:
        logger.warning("admin_login_disabled | reason=ADMIN_PASSWORD not set")
        return False
    return hmac.compare_digest((candidate or "").strip().encode(), config.admin_password.encode())


def require_admin(
    x_admin_token: Optional[str] = Header(default=None),
    store: TokenStore = Depends(get_token_store),
) -> str:
    """FastAPI dependency guarding admin routes via the `x-admin-token` header."""
    if not store.is_valid(x_admin_token):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_admin_token  # type: ignore[return-value]

