from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from app.core.config import DEFAULT_TIMEZONE, resolve_timezone
from app.models import SiteSetting


UPDATED_LABEL_KEY = "rtp_updated_text"

_DAYS = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]  # Monday first, as datetime.weekday()
_MONTHS = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]


def format_date_label(now: Optional[datetime] = None, tz: str = DEFAULT_TIMEZONE) -> str:
    """Indonesian long date, e.g. 'Sabtu, 17 Oktober 2026'."""
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    local = current.astimezone(ZoneInfo(resolve_timezone(tz)))
    return f"{_DAYS[local.weekday()]}, {local.day:02d} {_MONTHS[local.month - 1]} {local.year}"


def format_updated_label(now: Optional[datetime] = None, tz: str = DEFAULT_TIMEZONE) -> str:
    return f"Update RTP: {format_date_label(now, tz)}"


def default_settings(tz: str = DEFAULT_TIMEZONE) -> Dict[str, str]:
    return {
        "marquee_text": "Selamat datang.",
        "subtitle_text": "Konten bisa kamu atur dari halaman admin.",
        "login_url": "#",
        "daftar_url": "#",
        "section_title": "PRAGMATIC PLAY SLOT LIVE RTP",
        "suka_value": "5.9",
        UPDATED_LABEL_KEY: format_updated_label(tz=tz),
        "bg_url": "",
    }


def to_setting_text(value: object) -> Optional[str]:
    """Render a scalar as stored setting text; None for unsupported types.

    Booleans become 'true'/'false' so the admin page can compare them as strings.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


class SiteSettingsService:
    """Key/value settings: read all, get, upsert one or many, seed defaults."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def all(self) -> Dict[str, str]:
        return {row.key: row.value for row in self.db.query(SiteSetting).all()}

    def get(self, key: str) -> Optional[str]:
        row = self.db.get(SiteSetting, key)
        return row.value if row is not None else None

    def set(self, key: str, value: str, *, commit: bool = True) -> SiteSetting:
        """Upsert one key. With `commit=False` the caller owns the transaction."""
        row = self.db.get(SiteSetting, key)
        if row is None:
            row = SiteSetting(key=key, value=str(value))
            self.db.add(row)
        else:
            row.value = str(value)
        if commit:
            self.db.commit()
        else:
            self.db.flush()
        return row

    def set_many(self, values: Mapping[str, object]) -> List[str]:
        """Upsert every scalar value in one transaction; returns the keys written."""
        written: List[str] = []
        try:
            for raw_key, raw in values.items():
                key = raw_key.strip() if isinstance(raw_key, str) else ""
                text = to_setting_text(raw)
                if not key or text is None:
                    continue
                self.set(key, text, commit=False)
                written.append(key)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return written

    def ensure_defaults(self, tz: str = DEFAULT_TIMEZONE) -> List[str]:
        """Insert missing default keys without touching existing values."""
        existing = {key for (key,) in self.db.query(SiteSetting.key).all()}
        inserted: List[str] = []
        for key, value in default_settings(tz).items():
            if key in existing:
                continue
            self.db.add(SiteSetting(key=key, value=value))
            inserted.append(key)
        if inserted:
            self.db.commit()
        return inserted
