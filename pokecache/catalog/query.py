"""
Read side of the cache: filtered list queries and single-item lookup.

Lookup resolution order, first match wins:
1. exact cache key (lowercase name)
2. cached record whose id, as a string, equals the key
3. remote fetch; the result is upserted so the next lookup hits step 1

Any remote failure in step 3 becomes PokemonNotFoundError; the remote error
kind is logged but not exposed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pokecache.catalog.cache_manager import CacheManager
from pokecache.catalog.refresh import CatalogClient
from pokecache.integrations.contracts.catalog import PokemonRecord
from pokecache.integrations.contracts.errors import PokemonNotFoundError, RemoteError

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 50


@dataclass
class PokemonQuery:
    """Optional filters for list queries. All supplied filters must match."""

    name_contains: Optional[str] = None
    types: List[str] = field(default_factory=list)
    min_weight: Optional[int] = None
    max_weight: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def from_params(
        cls,
        name_contains: Optional[str] = None,
        type_filter: Optional[str] = None,
        min_weight: Optional[int] = None,
        max_weight: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> "PokemonQuery":
        """Build a query from raw request parameters (``type`` is comma-separated)."""
        return cls(
            name_contains=name_contains or None,
            types=parse_type_filter(type_filter),
            min_weight=min_weight,
            max_weight=max_weight,
            limit=limit,
        )


def parse_type_filter(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [token.strip().lower() for token in value.split(",") if token.strip()]


def filter_pokemon(records: Sequence[PokemonRecord], q: PokemonQuery) -> List[PokemonRecord]:
    """Apply a PokemonQuery's filters to a list of records and return matching ones."""
    result = list(records)

    if q.name_contains:
        search = q.name_contains.lower()
        result = [p for p in result if search in p.name.lower()]
    if q.types:
        wanted = {t.lower() for t in q.types}
        result = [p for p in result if any(t.lower() in wanted for t in p.types)]
    if q.min_weight is not None:
        result = [p for p in result if p.weight >= q.min_weight]
    if q.max_weight is not None:
        result = [p for p in result if p.weight <= q.max_weight]

    return result


class QueryEngine:
    def __init__(self, cache: CacheManager, client: CatalogClient, default_limit: int = DEFAULT_LIST_LIMIT) -> None:
        self.cache = cache
        self.client = client
        self.default_limit = default_limit

    def list_pokemon(self, query: PokemonQuery) -> List[PokemonRecord]:
        limit = query.limit if query.limit and query.limit > 0 else self.default_limit
        matches = filter_pokemon(self.cache.values(), query)
        matches.sort(key=lambda p: p.id)
        return matches[:limit]

    async def lookup(self, id_or_name: str) -> PokemonRecord:
        key = id_or_name.strip().lower()

        record = self.cache.get(key)
        if record is not None:
            return record

        record = self.cache.find_by_id(key)
        if record is not None:
            return record

        try:
            record = await self.client.fetch_detail(key)
        except RemoteError as e:
            logger.info("Lookup for %r fell through to remote and failed: %s", key, e)
            raise PokemonNotFoundError(key) from e

        self.cache.upsert(record)
        return record
