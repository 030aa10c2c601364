"""Cache store interface used by the client for conditional requests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Last successful response for one request URL.

    ``last_modified`` holds the ``Date`` header of that response verbatim; it
    is replayed as ``If-Modified-Since`` on the next request.
    """

    etag: str
    last_modified: str
    body: str


class CacheStore(ABC):
    """Common interface implemented by every response cache."""

    @abstractmethod
    def get(self, url: str) -> CacheEntry | None:
        """Return the entry stored for ``url`` without side effects."""

    @abstractmethod
    def put(self, url: str, entry: CacheEntry) -> None:
        """Insert or replace the entry for ``url``."""

    @abstractmethod
    def remove(self, url: str) -> None:
        """Drop the entry for ``url``; missing entries are ignored."""


__all__ = ["CacheEntry", "CacheStore"]
