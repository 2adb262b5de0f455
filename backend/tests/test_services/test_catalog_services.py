"""Tests for pool game and provider admin services."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from app.models import PoolGame, Provider, clamp_int
from app.services import PoolGameService, ProviderService
from app.services.pool_games import normalize_pool_game


@pytest.mark.parametrize(
    "value,expected",
    [(50, 50), ("77", 77), (" 12 ", 12), (150, 100), (-3, 0), (7.9, 7), ("abc", 0), (None, 0), ("", 0)],
)
def test_clamp_int(value, expected) -> None:
    assert clamp_int(value, 0, 100, 0) == expected


def test_normalize_pool_game_requires_core_fields() -> None:
    with pytest.raises(ValueError, match="provider/title/image_url required"):
        normalize_pool_game({"provider": "pp", "title": "  ", "image_url": "x"})


def test_normalize_pool_game_defaults() -> None:
    payload = normalize_pool_game({"provider": " pp ", "title": "T", "image_url": "u", "percent": "250", "label": None})
    assert payload["provider"] == "pp"
    assert payload["label"] == ""
    assert payload["percent"] == 100
    assert payload["enabled"] is True
    assert payload["is_hot"] is False


def test_pool_upsert_creates_then_updates(db_session: Session) -> None:
    svc = PoolGameService(db_session)
    game = svc.upsert({"provider": "pp", "title": "Gates", "image_url": "u1", "percent": 80})
    assert game.id is not None

    updated = svc.upsert({"id": game.id, "provider": "pg", "title": "Gates 2", "image_url": "u2", "enabled": False})
    assert updated.id == game.id
    assert updated.title == "Gates 2"
    assert updated.enabled is False
    assert updated.percent == 0
    assert svc.count() == 1


def test_pool_upsert_unknown_id_raises(db_session: Session) -> None:
    with pytest.raises(KeyError):
        PoolGameService(db_session).upsert({"id": 999, "provider": "pp", "title": "T", "image_url": "u"})


def test_pool_list_enabled_filters(db_session: Session, add_pool_games) -> None:
    add_pool_games(db_session, 3)
    add_pool_games(db_session, 2, enabled=False, prefix="Off")
    svc = PoolGameService(db_session)
    assert len(svc.list()) == 5
    enabled = svc.list_enabled()
    assert len(enabled) == 3
    assert all(g.enabled for g in enabled)


def test_pool_delete(db_session: Session, add_pool_games) -> None:
    games = add_pool_games(db_session, 1)
    svc = PoolGameService(db_session)
    assert svc.delete(games[0].id) is True
    assert svc.delete(games[0].id) is False
    assert db_session.query(PoolGame).count() == 0


def test_provider_upsert_and_ordering(db_session: Session) -> None:
    svc = ProviderService(db_session)
    svc.upsert({"provider_key": "pg", "provider_name": "PGSOFT", "icon_url": "i", "order_no": 2})
    svc.upsert({"provider_key": "pp", "provider_name": "PRAGMATIC", "icon_url": "i", "order_no": "1"})
    svc.upsert({"provider_key": "hb", "provider_name": "HABANERO", "icon_url": "i", "order_no": 99999, "enabled": False})

    assert [p.provider_key for p in svc.list()] == ["pp", "pg", "hb"]
    assert [p.provider_key for p in svc.list(enabled_only=True)] == ["pp", "pg"]
    assert db_session.get(Provider, "hb").order_no == 9999

    svc.upsert({"provider_key": "pp", "provider_name": "PRAGMATIC PLAY", "icon_url": "i2"})
    pp = db_session.get(Provider, "pp")
    assert pp.provider_name == "PRAGMATIC PLAY"
    assert pp.order_no == 0


def test_provider_upsert_missing_fields(db_session: Session) -> None:
    with pytest.raises(ValueError, match="Missing fields"):
        ProviderService(db_session).upsert({"provider_key": "pp", "provider_name": ""})


def test_provider_delete(db_session: Session) -> None:
    svc = ProviderService(db_session)
    svc.upsert({"provider_key": "pp", "provider_name": "P", "icon_url": "i"})
    assert svc.delete("pp") is True
    assert svc.delete("pp") is False
