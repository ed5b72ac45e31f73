"""
Error taxonomy for the catalog integration.

RemoteError is raised by the catalog client only. PokemonNotFoundError is the
domain-level outcome of a lookup that exhausted the cache and the remote
fallback; callers never see which remote failure caused it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class RemoteErrorKind(str, Enum):
    TIMEOUT = "TIMEOUT"
    HTTP_STATUS = "HTTP_STATUS"
    NETWORK = "NETWORK"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class RemoteError(Exception):
    def __init__(self, kind: RemoteErrorKind, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.kind is RemoteErrorKind.HTTP_STATUS and self.status_code == 404

    @classmethod
    def timeout(cls) -> "RemoteError":
        return cls(RemoteErrorKind.TIMEOUT, "Request to catalog API timed out")

    @classmethod
    def http_status(cls, status_code: int) -> "RemoteError":
        return cls(RemoteErrorKind.HTTP_STATUS, f"API error: {status_code}", status_code=status_code)

    @classmethod
    def network(cls, detail: str = "") -> "RemoteError":
        message = "Network error" if not detail else f"Network error: {detail}"
        return cls(RemoteErrorKind.NETWORK, message)

    @classmethod
    def invalid_payload(cls, detail: str) -> "RemoteError":
        return cls(RemoteErrorKind.INVALID_PAYLOAD, f"Invalid catalog payload: {detail}")


class PokemonNotFoundError(LookupError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Pokémon not found: {key}")
        self.key = key
