"""
Catalog contracts.

Defines the normalized record served by the API and the snapshot persisted by
the cache store. Field names follow the remote service (``types``,
``abilities``, ``sprites``) so the cache file and the API responses share one
shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class PokemonRecord(BaseModel):
    """One normalized catalog entry. Always replaced wholesale, never patched."""

    id: int = Field(gt=0)
    name: str
    height: int = Field(default=0, ge=0)
    weight: int = Field(default=0, ge=0)
    types: List[str] = Field(default_factory=list)
    abilities: List[str] = Field(default_factory=list)
    sprites: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _lowercase_name(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("name must not be empty")
        return value


class CacheSnapshot(BaseModel):
    """Full cache state: last save timestamp plus records keyed by lowercase name."""

    fetched_at: Optional[str] = None
    pokemon: Dict[str, PokemonRecord] = Field(default_factory=dict)

    @field_validator("pokemon")
    @classmethod
    def _lowercase_keys(cls, value: Dict[str, PokemonRecord]) -> Dict[str, PokemonRecord]:
        # Re-key by record name so older files with mixed-case keys collapse.
        return {record.name.lower(): record for record in value.values()}


@dataclass
class CatalogEntry:
    """A single entry of the remote list endpoint."""

    name: str
    url: Optional[str] = None
