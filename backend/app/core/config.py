"""Runtime configuration read from environment variables.

Values are read on every `load_config()` call so tests can monkeypatch the
environment. Invalid numbers and unknown time zones fall back to their
defaults with a warning.
"""

from __future__ import annotations

import logging
import os
from typing import Optional
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_SIZE = 12
DEFAULT_FRESHNESS_HOURS = 2
DEFAULT_SNAPSHOT_CRON = "0 * * * *"
DEFAULT_RETENTION_DAYS = 7
DEFAULT_TIMEZONE = "Asia/Jakarta"
DEFAULT_ADMIN_TOKEN_TTL_MIN = 120


def _get_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("config_invalid_int | name=%s value=%s default=%s", name, raw, default)
        return default
    return max(minimum, value)


def resolve_timezone(name: Optional[str], default: str = DEFAULT_TIMEZONE) -> str:
    """Return `name` when it is a loadable IANA zone, else `default` with a warning."""
    value = (name or "").strip()
    if not value:
        return default
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("config_invalid_timezone | value=%s default=%s", value, default)
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    snapshot_size: int = DEFAULT_SNAPSHOT_SIZE
    freshness_hours: int = DEFAULT_FRESHNESS_HOURS
    snapshot_cron: str = DEFAULT_SNAPSHOT_CRON
    retention_days: int = DEFAULT_RETENTION_DAYS
    timezone: str = DEFAULT_TIMEZONE
    admin_password: str = ""
    admin_token_ttl_min: int = DEFAULT_ADMIN_TOKEN_TTL_MIN

    def warnings(self) -> list[str]:
        """Return human-readable notes about suspicious combinations."""
        notes: list[str] = []
        if self.freshness_hours > self.retention_days * 24:
            notes.append(
                f"freshness window ({self.freshness_hours}h) exceeds retention horizon "
                f"({self.retention_days}d); public reads will regenerate on every miss"
            )
        if not self.admin_password:
            notes.append("ADMIN_PASSWORD is empty; admin login is disabled")
        return notes


def load_config() -> AppConfig:
    """Build an `AppConfig` from the current environment."""
    return AppConfig(
        snapshot_size=_get_int("SNAPSHOT_SIZE", DEFAULT_SNAPSHOT_SIZE),
        freshness_hours=_get_int("SNAPSHOT_TTL_HOURS", DEFAULT_FRESHNESS_HOURS),
        snapshot_cron=(os.getenv("SNAPSHOT_CRON") or DEFAULT_SNAPSHOT_CRON).strip(),
        retention_days=_get_int("SNAPSHOT_RETENTION_DAYS", DEFAULT_RETENTION_DAYS),
        timezone=resolve_timezone(os.getenv("APP_TIMEZONE")),
        admin_password=(os.getenv("ADMIN_PASSWORD") or "").strip(),
        admin_token_ttl_min=_get_int("ADMIN_TOKEN_TTL_MIN", DEFAULT_ADMIN_TOKEN_TTL_MIN),
    )


def get_config() -> AppConfig:
    """FastAPI dependency returning the current configuration."""
    return load_config()
