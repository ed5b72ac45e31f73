"""
Real HTTP integration clients.

These clients talk to the remote Pokémon catalog (PokeAPI) over HTTP and
return data shaped according to pokecache/integrations/contracts/*.

Tests swap the transport (httpx.MockTransport) or pass a duck-typed client
exposing the same two coroutines.
"""

from .pokeapi import PokeApiClient

__all__ = ["PokeApiClient"]
