"""
In-memory Pokémon cache with write-through persistence.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Union

from pokecache.integrations.contracts.catalog import CacheSnapshot, PokemonRecord

logger = logging.getLogger(__name__)


class SnapshotStoreProtocol(Protocol):
    def load(self) -> CacheSnapshot: ...

    def save(self, snapshot: CacheSnapshot) -> None: ...


class CacheManager:
    """Owns the in-memory snapshot. Every mutation is saved before the call returns."""

    def __init__(self, store: SnapshotStoreProtocol) -> None:
        self.store = store
        self._snapshot = CacheSnapshot()

    def load(self) -> int:
        """Replace the in-memory snapshot with the stored one; returns the item count."""
        self._snapshot = self.store.load()
        logger.info("Loaded %d Pokémon from cache", len(self._snapshot.pokemon))
        return len(self._snapshot.pokemon)

    def get(self, key: str) -> Optional[PokemonRecord]:
        return self._snapshot.pokemon.get(key.strip().lower())

    def find_by_id(self, pokemon_id: Union[int, str]) -> Optional[PokemonRecord]:
        # Compared as strings so any key is safe to pass; "007" does not match id 7.
        key = str(pokemon_id)
        for record in self._snapshot.pokemon.values():
            if str(record.id) == key:
                return record
        return None

    def upsert(self, record: PokemonRecord) -> None:
        self._snapshot.pokemon[record.name.lower()] = record
        self.save()

    def save(self) -> None:
        self.store.save(self._snapshot)

    def values(self) -> List[PokemonRecord]:
        # Copy of the current records; later upserts don't affect the caller's list.
        return list(self._snapshot.pokemon.values())

    def count(self) -> int:
        return len(self._snapshot.pokemon)

    @property
    def fetched_at(self) -> Optional[str]:
        return self._snapshot.fetched_at
