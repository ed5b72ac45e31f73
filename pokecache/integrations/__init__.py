"""
Integrations layer.
This package contains all code used to communicate with the remote Pokémon catalog:
- contracts: the normalized Record / Snapshot shapes and the error taxonomy
- clients/real_http: the PokeAPI HTTP client
- policy: normalization of raw remote payloads into contracts

Key rule:
- Catalog components MUST NOT call the remote API directly.
- The refresh orchestrator and query engine go through the catalog client only.
"""

from .contracts.catalog import CacheSnapshot, CatalogEntry, PokemonRecord
from .contracts.errors import PokemonNotFoundError, RemoteError, RemoteErrorKind

__all__ = [
    "CacheSnapshot", "CatalogEntry", "PokemonRecord",
    "PokemonNotFoundError", "RemoteError", "RemoteErrorKind",
]
