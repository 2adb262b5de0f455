"""Demo content for a fresh deployment, inserted only into empty tables."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.config import AppConfig
from app.models import GameSnapshot, PoolGame, Provider
from app.services.snapshots import SnapshotService


DEMO_PROVIDERS = [
    {"provider_key": "pp", "provider_name": "PRAGMATIC", "icon_url": "https://via.placeholder.com/64?text=PP", "order_no": 1},
    {"provider_key": "pg", "provider_name": "PGSOFT", "icon_url": "https://via.placeholder.com/64?text=PG", "order_no": 2},
    {"provider_key": "hb", "provider_name": "HABANERO", "icon_url": "https://via.placeholder.com/64?text=HB", "order_no": 3},
    {"provider_key": "idn", "provider_name": "IDN", "icon_url": "https://via.placeholder.com/64?text=IDN", "order_no": 4},
]

DEMO_POOL_GAMES = [
    ("pp", "Fantastic Freespins", "https://via.placeholder.com/300?text=Game1", "EKSKLUSIF", "Manual 9", "Manual 7", "Auto 70", "02:22 - 06:26", 82, True, True),
    ("pp", "Anime Mecha", "https://via.placeholder.com/300?text=Game2", "", "Auto 30", "Manual 8", "Auto 50", "01:10 - 03:40", 67, False, True),
    ("pg", "Mahjong Ways", "https://via.placeholder.com/300?text=Game3", "", "Manual 6", "Auto 40", "Auto 70", "10:00 - 12:00", 74, True, False),
    ("hb", "Hot Hot Fruit", "https://via.placeholder.com/300?text=Game4", "", "Auto 20", "Auto 50", "Manual 9", "14:00 - 16:00", 58, False, False),
    ("idn", "Zeus IDN", "https://via.placeholder.com/300?text=Game5", "", "Manual 5", "Manual 7", "Auto 30", "19:00 - 21:00", 90, True, True),
]

_POOL_COLUMNS = ("provider", "title", "image_url", "label", "pola1", "pola2", "pola3", "jam", "percent", "is_hot", "is_new")


class SeedService:
    def __init__(self, db: Session, config: Optional[AppConfig] = None) -> None:
        self.db = db
        self.config = config

    def status(self) -> Dict[str, int]:
        return {
            "providers": self.db.query(Provider).count(),
            "pool_games": self.db.query(PoolGame).count(),
            "snapshots": self.db.query(GameSnapshot).count(),
        }

    def seed(self) -> Dict[str, Any]:
        """Fill empty providers/pool tables, then generate a snapshot."""
        seed_providers = self.db.query(Provider).count() == 0
        seed_pool = self.db.query(PoolGame).count() == 0
        try:
            if seed_providers:
                self.db.add_all(Provider(enabled=True, **row) for row in DEMO_PROVIDERS)
            if seed_pool:
                self.db.add_all(
                    PoolGame(enabled=True, **dict(zip(_POOL_COLUMNS, row))) for row in DEMO_POOL_GAMES
                )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        outcome = SnapshotService(self.db, self.config).generate()
        return {
            "ok": True,
            "seeded_providers": seed_providers,
            "seeded_pool": seed_pool,
            "snapshot": outcome.as_dict(),
        }
