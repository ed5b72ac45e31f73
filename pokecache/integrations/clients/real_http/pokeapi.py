"""
PokeAPI HTTP Client.

Purpose:
- Fetches the list of Pokémon identifiers and per-Pokémon detail payloads
- Normalizes detail payloads into the PokemonRecord contract

Implementation notes:
- Uses httpx for async requests, one AsyncClient per call
- Every transport failure is classified into a RemoteError (timeout, HTTP status, network)
- A 404 from the detail endpoint is reported as RemoteError.is_not_found

Important:
- This client is the ONLY place that talks to the remote catalog.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from pokecache.integrations.contracts.catalog import CatalogEntry, PokemonRecord
from pokecache.integrations.contracts.errors import RemoteError
from pokecache.integrations.policy.response_wrappers import normalize_list_response, normalize_pokemon_detail

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_TIMEOUT_MS = 10_000


class PokeApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_ms / 1000.0
        self._transport = transport

    async def list_identifiers(self, limit: int) -> List[CatalogEntry]:
        """Return up to ``limit`` entries from the list endpoint, starting at offset 0."""
        data = await self._request_json("/pokemon", params={"limit": limit, "offset": 0})
        entries = normalize_list_response(data)
        logger.info("Catalog list returned %d entries (limit=%d)", len(entries), limit)
        return entries

    async def fetch_detail(self, name_or_id: Union[str, int]) -> PokemonRecord:
        """Fetch one Pokémon by name or numeric id and normalize it."""
        key = str(name_or_id).strip().lower()
        data = await self._request_json(f"/pokemon/{key}")
        return normalize_pokemon_detail(data)

    async def _request_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("GET %s params=%s", url, params)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Catalog request timed out: {url}")
            raise RemoteError.timeout() from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"HTTP error from catalog API: {e.response.status_code} {url}")
            raise RemoteError.http_status(e.response.status_code) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Request error connecting to catalog API: {e!r}")
            raise RemoteError.network(type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError.invalid_payload(f"response from {url} is not JSON") from e
