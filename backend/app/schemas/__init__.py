"""Pydantic schemas package.

Public re-exports keep import paths stable.
"""

from .auth import LoginRequest, LoginResponse  # noqa: F401
from .providers import (
    ProviderUpsert,
    ProviderDelete,
    PublicProvider,
    Provider,
)  # noqa: F401
from .pool_games import (
    PoolGameUpsert,
    PoolGameDelete,
    PoolGame,
)  # noqa: F401
from .snapshots import GameSnapshot, SnapshotOutcome  # noqa: F401
from .seed import SeedStatus, SeedResult  # noqa: F401
