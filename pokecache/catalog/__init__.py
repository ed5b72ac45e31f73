"""
Cache-backed catalog core.

This package wires together:
- catalog.cache_manager: the in-memory snapshot and its write-through persistence
- catalog.refresh: bulk population from the remote catalog
- catalog.query: list filtering and single-item lookup with remote fallback
"""

from .cache_manager import CacheManager
from .query import PokemonQuery, QueryEngine
from .refresh import RefreshOrchestrator, RefreshOutcome

__all__ = ["CacheManager", "PokemonQuery", "QueryEngine", "RefreshOrchestrator", "RefreshOutcome"]
