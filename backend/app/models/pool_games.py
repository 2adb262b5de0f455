from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index

from app.core.db import Base
from .common import _utcnow


class PoolGame(Base):
    """Candidate catalog entry that snapshots are sampled from."""

    __tablename__ = "pool_games"

    id = Column(Integer, primary_key=True, index=True)
    provider = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)
    label = Column(String(255), nullable=False, default="")
    # Free-text play patterns, e.g. "Manual 9" / "Auto 70"
    pola1 = Column(String(255), nullable=False, default="")
    pola2 = Column(String(255), nullable=False, default="")
    pola3 = Column(String(255), nullable=False, default="")
    jam = Column(String(255), nullable=False, default="")  # time window text, e.g. "02:22 - 06:26"
    percent = Column(Integer, nullable=False, default=0)
    is_hot = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True, index=True)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("idx_pool_provider", "provider"),
    )

    def __repr__(self) -> str:
        return f"<PoolGame(id={self.id}, provider='{self.provider}', title='{self.title}', enabled={self.enabled})>"
