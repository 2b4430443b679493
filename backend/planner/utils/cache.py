"""In-memory LRU cache with TTL expiration.

Process-level cache used when Redis is not configured. Values are whatever
the caller stores (JSON-ready dicts for city pools).
"""

import fnmatch
import time
from collections import OrderedDict
from typing import Any


class LRUCache:
    """TTL-aware LRU cache."""

    def __init__(self, max_size: int = 100, ttl_seconds: int = 86400) -> None:
        self._cache: OrderedDict[str, tuple[float, float, Any]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> Any | None:
        if key not in self._cache:
            return None
        ts, ttl, value = self._cache[key]
        if time.monotonic() - ts > ttl:
            del self._cache[key]
            return None
        self._cache.move_to_end(key)
        return value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        if key in self._cache:
            self._cache.move_to_end(key)
        ttl = self._ttl if ttl_seconds is None else ttl_seconds
        self._cache[key] = (time.monotonic(), ttl, value)
        if len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def delete_matching(self, pattern: str) -> int:
        """Delete keys matching a glob pattern; returns how many were removed."""
        matched = [key for key in self._cache if fnmatch.fnmatchcase(key, pattern)]
        for key in matched:
            del self._cache[key]
        return len(matched)
