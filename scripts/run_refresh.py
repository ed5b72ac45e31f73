#!/usr/bin/env python3
"""
Refresh the local Pokémon cache without starting the API:
- list the first N Pokémon from the remote catalog
- fetch each one's details and write them to the cache file
- print how many are cached and which ones failed
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from pokecache.catalog.cache_manager import CacheManager
from pokecache.catalog.refresh import RefreshOrchestrator
from pokecache.database.snapshot_store import SnapshotStore
from pokecache.integrations.clients.real_http.pokeapi import PokeApiClient
from pokecache.integrations.contracts.errors import RemoteError
from pokecache.utils.config_loader import load_service_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def refresh_once(limit: int | None, config_path: Path | None, cache_file: Path | None) -> int:
    cfg = load_service_config(config_path)
    store = SnapshotStore(cache_file or Path(cfg.cache.file))
    cache = CacheManager(store)
    cache.load()

    client = PokeApiClient(base_url=cfg.remote.base_url, timeout_ms=cfg.remote.timeout_ms)
    refresher = RefreshOrchestrator(cache, client)

    try:
        outcome = await refresher.refresh(limit or cfg.refresh.default_limit)
    except RemoteError as e:
        print(f"Refresh failed: {e}")
        return 1

    print(f"Cached: {outcome.cached} (refreshed {outcome.refreshed}/{outcome.attempted})")
    if outcome.failed:
        print(f"Failed: {', '.join(outcome.failed)}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Refresh the Pokémon cache file from PokeAPI.")
    parser.add_argument("--limit", "-n", type=int, default=None, help="Number of Pokémon to fetch (default from config)")
    parser.add_argument("--config", type=Path, default=None, help="Path to service_config.yml")
    parser.add_argument("--cache-file", type=Path, default=None, help="Override the cache file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    return asyncio.run(refresh_once(args.limit, args.config, args.cache_file))


if __name__ == "__main__":
    sys.exit(main())
