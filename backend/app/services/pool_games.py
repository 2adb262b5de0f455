from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from app.models import PoolGame, clamp_int


_TEXT_FIELDS = ("label", "pola1", "pola2", "pola3", "jam")
_REQUIRED_FIELDS = ("provider", "title", "image_url")


def _text(value: Any) -> str:
    return str(value if value is not None else "").strip()


def normalize_pool_game(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Trim text, clamp percent to 0..100 and coerce flags.

    `enabled` defaults to True unless explicitly false.
    Raises ValueError when provider/title/image_url is missing.
    """
    payload: Dict[str, Any] = {name: _text(data.get(name)) for name in _REQUIRED_FIELDS}
    if not all(payload[name] for name in _REQUIRED_FIELDS):
        raise ValueError("provider/title/image_url required")
    for name in _TEXT_FIELDS:
        payload[name] = _text(data.get(name))
    payload["percent"] = clamp_int(data.get("percent"), 0, 100, 0)
    payload["is_hot"] = bool(data.get("is_hot"))
    payload["is_new"] = bool(data.get("is_new"))
    payload["enabled"] = data.get("enabled") is not False
    return payload


class PoolGameService:
    """Pool store: admin CRUD plus the enabled listing used by snapshots."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> List[PoolGame]:
        q = self.db.query(PoolGame).order_by(PoolGame.updated_at.desc(), PoolGame.id.desc())
        return list(q.all())

    def list_enabled(self) -> List[PoolGame]:
        q = (
            self.db.query(PoolGame)
            .filter(PoolGame.enabled.is_(True))
            .order_by(PoolGame.updated_at.desc(), PoolGame.id.desc())
        )
        return list(q.all())

    def get(self, game_id: int) -> Optional[PoolGame]:
        return self.db.get(PoolGame, game_id)

    def count(self) -> int:
        return self.db.query(PoolGame).count()

    def upsert(self, data: Mapping[str, Any]) -> PoolGame:
        """Insert when `id` is missing/zero, otherwise update that row.

        Raises KeyError('pool_game_not_found') for an unknown id.
        """
        game_id = clamp_int(data.get("id"), 1, 999999999, 0) if data.get("id") else 0
        payload = normalize_pool_game(data)
        if not game_id:
            game = PoolGame(**payload)
            self.db.add(game)
        else:
            game = self.db.get(PoolGame, game_id)
            if game is None:
                raise KeyError("pool_game_not_found")
            for key, value in payload.items():
                setattr(game, key, value)
        self.db.commit()
        self.db.refresh(game)
        return game

    def delete(self, game_id: int) -> bool:
        game = self.db.get(PoolGame, game_id)
        if game is None:
            return False
        self.db.delete(game)
        self.db.commit()
        return True
