from __future__ import annotations

from pydantic import BaseModel

from .snapshots import SnapshotOutcome


class SeedStatus(BaseModel):
    providers: int
    pool_games: int
    snapshots: int


class SeedResult(BaseModel):
    ok: bool
    seeded_providers: bool
    seeded_pool: bool
    snapshot: SnapshotOutcome
