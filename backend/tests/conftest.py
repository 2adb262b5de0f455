"""Root conftest for tests directory."""

from __future__ import annotations

from datetime import datetime
from typing import Generator, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.db import Base
from app.models import GameSnapshot, PoolGame


@pytest.fixture()
def session_factory() -> Generator[sessionmaker, None, None]:
    """In-memory SQLite session factory sharing one connection (StaticPool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    # Ensure models are imported
    import app.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Provide a test DB session."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def _add_pool_games(db: Session, count: int, *, enabled: bool = True, prefix: str = "Game") -> list[PoolGame]:
    games = [
        PoolGame(
            provider="pp" if i % 2 else "pg",
            title=f"{prefix} {i}",
            image_url=f"https://img.example/{prefix.lower()}-{i}.png",
            label="",
            pola1="Manual 9",
            pola2="Auto 50",
            pola3="Manual 7",
            jam="02:00 - 04:00",
            percent=50 + i % 50,
            is_hot=i % 3 == 0,
            is_new=i % 4 == 0,
            enabled=enabled,
        )
        for i in range(count)
    ]
    db.add_all(games)
    db.commit()
    return games


def _add_snapshot_row(db: Session, created_at: datetime, title: str = "Old", provider: Optional[str] = "pp") -> GameSnapshot:
    row = GameSnapshot(
        provider=provider,
        title=title,
        image_url="https://img.example/old.png",
        percent=10,
        created_at=created_at,
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture()
def add_pool_games():
    """Factory fixture: add_pool_games(db, count, enabled=True, prefix="Game")."""
    return _add_pool_games


@pytest.fixture()
def add_snapshot_row():
    """Factory fixture: add_snapshot_row(db, created_at, title="Old")."""
    return _add_snapshot_row
