from __future__ import annotations

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class ProviderUpsert(BaseModel):
    provider_key: Optional[str] = Field(None, description="Stable provider key")
    provider_name: Optional[str] = Field(None, description="Display name")
    icon_url: Optional[str] = Field(None, description="Icon URL")
    order_no: Optional[int | str] = Field(None, description="Sort order, clamped to 0..9999")
    enabled: Optional[bool] = Field(None, description="Visible on the public page (default true)")

    model_config = ConfigDict(extra="ignore")


class ProviderDelete(BaseModel):
    provider_key: Optional[str] = None


class PublicProvider(BaseModel):
    provider_key: str
    provider_name: str
    icon_url: str
    order_no: int

    model_config = ConfigDict(from_attributes=True)


class Provider(PublicProvider):
    enabled: bool
    updated_at: datetime
