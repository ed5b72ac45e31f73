from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError

from pokecache.integrations.contracts.catalog import CatalogEntry, PokemonRecord
from pokecache.integrations.contracts.errors import RemoteError


def normalize_pokemon_detail(raw: Dict[str, Any]) -> PokemonRecord:
    if not isinstance(raw, dict):
        raise RemoteError.invalid_payload(f"expected an object, got {type(raw).__name__}")

    identifier = _required(raw, "id")
    name = _required(raw, "name")

    return _build_record(
        {
            "id": identifier,
            "name": str(name),
            "height": raw.get("height") or 0,
            "weight": raw.get("weight") or 0,
            "types": _nested_names(raw.get("types"), "type"),
            "abilities": _nested_names(raw.get("abilities"), "ability"),
            "sprites": raw.get("sprites") if isinstance(raw.get("sprites"), dict) else {},
        },
        raw,
    )


def normalize_list_response(raw: Dict[str, Any]) -> List[CatalogEntry]:
    results = raw.get("results") if isinstance(raw, dict) else None
    if not isinstance(results, list):
        return []

    entries: List[CatalogEntry] = []
    for item in results:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        entries.append(CatalogEntry(name=str(item["name"]), url=item.get("url")))
    return entries


def _nested_names(value: Any, key: str) -> List[str]:
    # [{"slot": 1, "type": {"name": "grass", "url": ...}}, ...] -> ["grass", ...]
    if not isinstance(value, list):
        return []
    names: List[str] = []
    for item in value:
        inner = item.get(key) if isinstance(item, dict) else None
        if isinstance(inner, dict) and inner.get("name"):
            names.append(str(inner["name"]))
    return names


def _required(data: Dict[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise RemoteError.invalid_payload(f"missing required field '{key}'")
    return value


def _build_record(payload: Dict[str, Any], raw: Dict[str, Any]) -> PokemonRecord:
    try:
        return PokemonRecord(**payload)
    except ValidationError as exc:
        raise RemoteError.invalid_payload(f"validation failed for {raw.get('name')!r}: {exc}") from exc
