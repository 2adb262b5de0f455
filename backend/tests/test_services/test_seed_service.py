from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.config import AppConfig
from app.models import GameSnapshot, PoolGame, Provider
from app.services import SeedService
from app.services.seed import DEMO_POOL_GAMES, DEMO_PROVIDERS


def test_seed_fills_empty_tables_and_generates(db_session: Session) -> None:
    svc = SeedService(db_session, AppConfig(snapshot_size=12))
    assert svc.status() == {"providers": 0, "pool_games": 0, "snapshots": 0}

    result = svc.seed()

    assert result["ok"] is True
    assert result["seeded_providers"] is True
    assert result["seeded_pool"] is True
    assert result["snapshot"]["status"] == "succeeded"
    assert result["snapshot"]["count"] == len(DEMO_POOL_GAMES)
    assert svc.status() == {
        "providers": len(DEMO_PROVIDERS),
        "pool_games": len(DEMO_POOL_GAMES),
        "snapshots": len(DEMO_POOL_GAMES),
    }


def test_seed_leaves_populated_tables_alone(db_session: Session, add_pool_games) -> None:
    add_pool_games(db_session, 2)
    result = SeedService(db_session, AppConfig()).seed()
    assert result["seeded_pool"] is False
    assert result["seeded_providers"] is True
    assert db_session.query(PoolGame).count() == 2
    assert db_session.query(Provider).count() == len(DEMO_PROVIDERS)
    assert db_session.query(GameSnapshot).count() == 2
