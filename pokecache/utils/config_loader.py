"""
Service configuration loader (remote catalog, cache file, HTTP server).

Values come from config/service_config.yml and can be overridden by
environment variables (a .env file is honoured by the entry points):

    POKEAPI_BASE_URL, POKEAPI_TIMEOUT_MS, CACHE_FILE, PORT
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "service_config.yml"


class RemoteCatalogConfig(BaseModel):
    base_url: str = "https://pokeapi.co/api/v2"
    timeout_ms: int = Field(default=10_000, ge=1, le=120_000)


class CacheConfig(BaseModel):
    file: str = "cache.json"


class RefreshConfig(BaseModel):
    default_limit: int = Field(default=150, ge=1, le=100_000)


class QueryConfig(BaseModel):
    default_limit: int = Field(default=50, ge=1, le=10_000)


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class ServiceConfig(BaseModel):
    remote: RemoteCatalogConfig = Field(default_factory=RemoteCatalogConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


_ENV_OVERRIDES = {
    "POKEAPI_BASE_URL": ("remote", "base_url"),
    "POKEAPI_TIMEOUT_MS": ("remote", "timeout_ms"),
    "CACHE_FILE": ("cache", "file"),
    "PORT": ("server", "port"),
}


def load_service_config(config_path: Optional[Path] = None) -> ServiceConfig:
    """
    Load and validate the service configuration.

    Args:
        config_path: Path to a YAML config file. Defaults to config/service_config.yml;
            when the default file is absent the built-in defaults are used.

    Returns:
        Validated ServiceConfig object

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If config (after env overrides) doesn't match schema
    """
    data: Dict[str, Any] = {}
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.warning("Config file not found at %s; using defaults", config_path)
            config_path = None
    elif not config_path.exists():
        raise FileNotFoundError(f"Service config file not found: {config_path}")

    if config_path is not None:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    _apply_env_overrides(data)

    try:
        cfg = ServiceConfig(**data)
        logger.info("Loaded service config (source=%s)", config_path or "defaults")
        return cfg
    except ValidationError as e:
        logger.error("Service config validation failed: %s", e)
        raise


def _apply_env_overrides(data: Dict[str, Any]) -> None:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None or not value.strip():
            continue
        section_data = data.get(section)
        if not isinstance(section_data, dict):
            section_data = {}
            data[section] = section_data
        section_data[key] = value.strip()
