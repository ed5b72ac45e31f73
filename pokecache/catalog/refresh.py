"""
Bulk refresh of the Pokémon cache from the remote catalog.

Only the list call is fatal: if it fails the cache is left untouched and the
RemoteError propagates. Detail fetches run one at a time, in list order, and a
failed item is logged and skipped.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Protocol

from pokecache.catalog.cache_manager import CacheManager
from pokecache.integrations.contracts.catalog import CatalogEntry, PokemonRecord
from pokecache.integrations.contracts.errors import RemoteError

logger = logging.getLogger(__name__)


class CatalogClient(Protocol):
    async def list_identifiers(self, limit: int) -> List[CatalogEntry]: ...

    async def fetch_detail(self, name_or_id: str) -> PokemonRecord: ...


@dataclass
class RefreshOutcome:
    cached: int
    attempted: int = 0
    refreshed: int = 0
    failed: List[str] = field(default_factory=list)


class RefreshOrchestrator:
    def __init__(self, cache: CacheManager, client: CatalogClient) -> None:
        self.cache = cache
        self.client = client
        # Serializes refreshes only; reads and lookups never wait on it.
        self._lock = asyncio.Lock()

    async def refresh(self, limit: int) -> RefreshOutcome:
        async with self._lock:
            entries = await self.client.list_identifiers(limit)

            outcome = RefreshOutcome(cached=0, attempted=len(entries))
            for entry in entries:
                try:
                    record = await self.client.fetch_detail(entry.name)
                except RemoteError as e:
                    logger.warning("Failed to fetch %s: %s", entry.name, e)
                    outcome.failed.append(entry.name)
                    continue
                self.cache.upsert(record)
                outcome.refreshed += 1

            self.cache.save()
            outcome.cached = self.cache.count()

        logger.info(
            "Refresh finished: %d/%d refreshed, %d failed, %d cached",
            outcome.refreshed,
            outcome.attempted,
            len(outcome.failed),
            outcome.cached,
        )
        return outcome
