from __future__ import annotations

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class PoolGameUpsert(BaseModel):
    """Admin upsert payload. Loose types: values are normalized by the service."""

    id: Optional[int] = Field(None, description="Existing pool game ID; omit or 0 to create")
    provider: Optional[str] = Field(None, description="Provider key, e.g. 'pp'")
    title: Optional[str] = Field(None, description="Game title")
    image_url: Optional[str] = Field(None, description="Image URL")
    label: Optional[str] = Field(None, description="Optional badge text")
    pola1: Optional[str] = Field(None, description="Pattern 1")
    pola2: Optional[str] = Field(None, description="Pattern 2")
    pola3: Optional[str] = Field(None, description="Pattern 3")
    jam: Optional[str] = Field(None, description="Time window text")
    percent: Optional[int | float | str] = Field(None, description="Percent, clamped to 0..100")
    is_hot: Optional[bool] = Field(None, description="Show the HOT badge")
    is_new: Optional[bool] = Field(None, description="Show the NEW badge")
    enabled: Optional[bool] = Field(None, description="Eligible for snapshots (default true)")

    model_config = ConfigDict(extra="ignore")


class PoolGameDelete(BaseModel):
    id: Optional[int | str] = None


class PoolGame(BaseModel):
    id: int
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
    enabled: bool
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
