"""
Lightweight in-memory snapshot store for local development and tests.

Implements the same load/save interface as
``pokecache.database.snapshot_store.SnapshotStore`` without touching disk.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pokecache.integrations.contracts.catalog import CacheSnapshot


class InMemorySnapshotStore:
    def __init__(self, initial: Optional[CacheSnapshot] = None) -> None:
        self._snapshot: Optional[CacheSnapshot] = initial.model_copy(deep=True) if initial else None
        self.save_count = 0

    def load(self) -> CacheSnapshot:
        if self._snapshot is None:
            return CacheSnapshot()
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: CacheSnapshot) -> None:
        snapshot.fetched_at = datetime.now(timezone.utc).isoformat()
        self._snapshot = snapshot.model_copy(deep=True)
        self.save_count += 1

    def ping(self) -> bool:
        return True
