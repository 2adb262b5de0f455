"""Service layer.

Exposes:
- SiteSettingsService
- ProviderService
- PoolGameService
- SnapshotService / SnapshotStore / SnapshotOutcome
- SeedService
"""

from .site_settings import SiteSettingsService
from .providers import ProviderService
from .pool_games import PoolGameService
from .snapshots import SnapshotService, SnapshotStore, SnapshotOutcome
from .seed import SeedService

__all__ = [
    "SiteSettingsService",
    "ProviderService",
    "PoolGameService",
    "SnapshotService",
    "SnapshotStore",
    "SnapshotOutcome",
    "SeedService",
]
