"""
Contracts (data models).

This folder defines the shapes shared between the catalog client, the cache
and the HTTP layer:
- PokemonRecord: one normalized catalog entry
- CacheSnapshot: the full cache state as persisted on disk
- RemoteError / PokemonNotFoundError: the failure taxonomy

Both the real HTTP client and the test doubles must return these contracts.
"""
