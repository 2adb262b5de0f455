"""Key/value site settings (marquee text, links, labels, background)."""

from __future__ import annotations

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import validates

from app.core.db import Base
from .common import _utcnow, ValidationError422


class SiteSetting(Base):
    """One text setting. Values are always stored as text."""

    __tablename__ = "site_settings"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    @validates("key")
    def _validate_key(self, key: str, value: str) -> str:  # noqa: D401
        if value is None or value.strip() == "":
            raise ValidationError422("Setting key cannot be empty")
        return value.strip()

    def __repr__(self) -> str:
        return f"<SiteSetting(key='{self.key}')>"
