from __future__ import annotations

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class GameSnapshot(BaseModel):
    """Flat public record of one game in the current batch."""

    provider: str
    title: str
    image_url: str
    label: str
    pola1: str
    pola2: str
    pola3: str
    jam: str
    percent: int
    is_hot: bool
    is_new: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SnapshotOutcome(BaseModel):
    status: str = Field(..., description="'skipped', 'succeeded' or 'failed'")
    ok: bool
    count: int = 0
    reason: Optional[str] = Field(None, description="'empty pool' or 'storage error'")
    detail: Optional[str] = Field(None, description="Storage error text (admin only)")
