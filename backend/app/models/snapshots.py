from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index, event

from app.core.db import Base
from .common import _utcnow, ValidationError422


class GameSnapshot(Base):
    """Immutable copy of a pool game's display fields.

    Rows sharing one `created_at` form a batch. No foreign key to `pool_games`;
    edits to the pool never touch published rows.
    """

    __tablename__ = "game_snapshots"

    id = Column(Integer, primary_key=True)
    provider = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)
    label = Column(String(255), nullable=False, default="")
    pola1 = Column(String(255), nullable=False, default="")
    pola2 = Column(String(255), nullable=False, default="")
    pola3 = Column(String(255), nullable=False, default="")
    jam = Column(String(255), nullable=False, default="")
    percent = Column(Integer, nullable=False, default=0)
    is_hot = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    __table_args__ = (
        Index("idx_snapshots_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<GameSnapshot(id={self.id}, title='{self.title}', created_at={self.created_at})>"


@event.listens_for(GameSnapshot, "before_update")
def _reject_snapshot_update(mapper, connection, snapshot: GameSnapshot) -> None:
    raise ValidationError422("Snapshot rows are immutable")
