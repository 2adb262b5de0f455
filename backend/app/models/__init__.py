"""SQLAlchemy models package.

from app.models import (
    SiteSetting, Provider, PoolGame, GameSnapshot, clamp_int, ValidationError422,
)
"""

from .common import clamp_int, ValidationError422  # noqa: F401
from .settings import SiteSetting  # noqa: F401
from .providers import Provider  # noqa: F401
from .pool_games import PoolGame  # noqa: F401
from .snapshots import GameSnapshot  # noqa: F401
