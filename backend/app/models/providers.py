from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean

from app.core.db import Base
from .common import _utcnow


class Provider(Base):
    """Game provider shown as an icon tab on the landing page."""

    __tablename__ = "providers"

    provider_key = Column(String(100), primary_key=True)
    provider_name = Column(String(255), nullable=False)
    icon_url = Column(Text, nullable=False)
    order_no = Column(Integer, nullable=False, default=0)
    enabled = Column(Boolean, nullable=False, default=True, index=True)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Provider(key='{self.provider_key}', name='{self.provider_name}', enabled={self.enabled})>"
