"""API routers package."""

from . import health, public, auth, settings, providers, pool_games, snapshots, metrics  # noqa: F401
