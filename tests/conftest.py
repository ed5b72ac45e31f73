"""Pytest fixtures for the Pokémon cache tests."""

from typing import Any, Dict, Iterable, List, Optional

import pytest

from pokecache.catalog.cache_manager import CacheManager
from pokecache.database.memory_store import InMemorySnapshotStore
from pokecache.integrations.contracts.catalog import CatalogEntry, PokemonRecord
from pokecache.integrations.contracts.errors import RemoteError


def make_record(pokemon_id: int, name: str, weight: int = 10, types: Optional[List[str]] = None, **extra: Any) -> PokemonRecord:
    return PokemonRecord(
        id=pokemon_id,
        name=name,
        height=extra.pop("height", 7),
        weight=weight,
        types=types or [],
        abilities=extra.pop("abilities", []),
        sprites=extra.pop("sprites", {}),
    )


class DummyCatalogClient:
    """Stands in for PokeApiClient; records every call it receives."""

    def __init__(self, records: Iterable[PokemonRecord] = (), listing: Optional[List[str]] = None) -> None:
        self.records: Dict[str, PokemonRecord] = {r.name: r for r in records}
        self.listing = listing if listing is not None else list(self.records)
        self.failing: Dict[str, RemoteError] = {}
        self.list_error: Optional[RemoteError] = None
        self.list_calls: List[int] = []
        self.detail_calls: List[str] = []

    async def list_identifiers(self, limit: int) -> List[CatalogEntry]:
        self.list_calls.append(limit)
        if self.list_error is not None:
            raise self.list_error
        return [CatalogEntry(name=name) for name in self.listing[:limit]]

    async def fetch_detail(self, name_or_id) -> PokemonRecord:
        key = str(name_or_id).lower()
        self.detail_calls.append(key)
        if key in self.failing:
            raise self.failing[key]
        if key in self.records:
            return self.records[key]
        for record in self.records.values():
            if str(record.id) == key:
                return record
        raise RemoteError.http_status(404)


@pytest.fixture
def store():
    """In-memory snapshot store for tests."""
    return InMemorySnapshotStore()


@pytest.fixture
def cache(store):
    manager = CacheManager(store)
    manager.load()
    return manager
