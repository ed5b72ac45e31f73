#!/usr/bin/env python3
"""
Start the Pokémon cache API.

Port comes from PORT (or config/service_config.yml), default 3000:
  python scripts/run_server.py
  PORT=8080 python scripts/run_server.py
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pokecache.api.main import run

if __name__ == "__main__":
    run()
