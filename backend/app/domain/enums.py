from __future__ import annotations

from enum import Enum


class SnapshotStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SnapshotReason(str, Enum):
    EMPTY_POOL = "empty pool"
    STORAGE_ERROR = "storage error"
