"""Response caches backing conditional requests."""

from __future__ import annotations

from open_exchange_rates.cache.base_cache import CacheEntry, CacheStore
from open_exchange_rates.cache.memory_cache import InMemoryCache

__all__ = ["CacheEntry", "CacheStore", "InMemoryCache"]
