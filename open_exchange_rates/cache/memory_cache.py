"""Dictionary-backed cache store owned by a single client instance."""

from __future__ import annotations

from open_exchange_rates.cache.base_cache import CacheEntry, CacheStore


class InMemoryCache(CacheStore):
    """Keeps one :class:`CacheEntry` per exact request URL.

    Entries never expire; the server decides whether they are still valid by
    answering conditional requests. Not thread-safe.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def get(self, url: str) -> CacheEntry | None:
        return self._entries.get(url)

    def put(self, url: str, entry: CacheEntry) -> None:
        self._entries[url] = entry

    def remove(self, url: str) -> None:
        self._entries.pop(url, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["InMemoryCache"]
