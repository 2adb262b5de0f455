from __future__ import annotations

from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from app.models import Provider, clamp_int


class ProviderService:
    """Provider tabs: public enabled listing and admin upsert/delete."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, enabled_only: bool = False) -> List[Provider]:
        q = self.db.query(Provider)
        if enabled_only:
            q = q.filter(Provider.enabled.is_(True))
        q = q.order_by(Provider.order_no.asc(), Provider.provider_name.asc())
        return list(q.all())

    def count(self) -> int:
        return self.db.query(Provider).count()

    def upsert(self, data: Mapping[str, Any]) -> Provider:
        key = str(data.get("provider_key") or "").strip()
        name = str(data.get("provider_name") or "").strip()
        icon_url = str(data.get("icon_url") or "").strip()
        if not key or not name or not icon_url:
            raise ValueError("Missing fields")

        provider = self.db.get(Provider, key)
        if provider is None:
            provider = Provider(provider_key=key)
            self.db.add(provider)
        provider.provider_name = name
        provider.icon_url = icon_url
        provider.order_no = clamp_int(data.get("order_no"), 0, 9999, 0)
        provider.enabled = data.get("enabled") is not False
        self.db.commit()
        self.db.refresh(provider)
        return provider

    def delete(self, provider_key: str) -> bool:
        provider = self.db.get(Provider, provider_key)
        if provider is None:
            return False
        self.db.delete(provider)
        self.db.commit()
        return True
