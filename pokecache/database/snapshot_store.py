"""
File-backed snapshot store.

Holds the durable copy of the Pokémon cache as a single JSON document:

    {"fetched_at": "<iso timestamp>", "pokemon": {"<lowercase name>": {...record...}}}

Recovery rule: a missing, unreadable or invalid file loads as an empty
snapshot. The failure is logged and never raised, so a corrupt cache only
costs a refresh.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from pokecache.integrations.contracts.catalog import CacheSnapshot

logger = logging.getLogger(__name__)


class SnapshotStore:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> CacheSnapshot:
        if not self.path.exists():
            logger.info("No cache file at %s; starting with an empty cache", self.path)
            return CacheSnapshot()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return CacheSnapshot.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Failed to load cache file %s, starting empty: %s", self.path, e)
            return CacheSnapshot()

    def save(self, snapshot: CacheSnapshot) -> None:
        snapshot.fetched_at = datetime.now(timezone.utc).isoformat()
        payload = json.dumps(snapshot.model_dump(mode="json"), indent=2, ensure_ascii=False)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, self.path)

    def ping(self) -> bool:
        return self.path.parent.exists()
