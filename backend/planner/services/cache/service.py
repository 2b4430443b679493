"""Cache service implementation.

This module provides an abstract cache service interface, a Redis
implementation and an in-process LRU implementation. The places provider
caches fetched city pools through it so repeated builds for the same city do
not hit the network.

Cache keys for pools have the form ``pools:{city_lowercase}``.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

import redis.asyncio as redis

from planner.utils.cache import LRUCache


class CacheService(ABC):
    """Abstract base class for cache services.

    Defines the interface for caching operations including get, set,
    and invalidation. Also provides a static method for building
    consistent city pool cache keys.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to look up.

        Returns:
            The cached value if found, None otherwise.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store value in cache with optional TTL.

        Args:
            key: The cache key to store under.
            value: The value to cache (must be JSON serializable).
            ttl_seconds: Time-to-live in seconds. Uses the service default if None.
        """
        pass

    @abstractmethod
    async def invalidate(self, pattern: str) -> int:
        """Invalidate cache entries matching pattern.

        Args:
            pattern: Glob-style pattern to match keys (e.g., "pools:*").

        Returns:
            Number of keys invalidated.
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        pass

    @staticmethod
    def build_pools_key(city: str) -> str:
        """Generate cache key for a city's candidate pools.

        Example:
            >>> CacheService.build_pools_key(" Lisbon ")
            'pools:lisbon'
        """
        return f"pools:{city.strip().lower()}"


class RedisCacheService(CacheService):
    """Redis-based implementation of the cache service.

    Uses Redis for storing cached values with support for TTL,
    pattern-based invalidation, and JSON serialization.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        default_ttl: int = 3600,
    ) -> None:
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Establish connection to Redis."""
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_connected(self) -> redis.Redis:
        if self._client is None:
            await self.connect()
        return self._client  # type: ignore

    async def get(self, key: str) -> Any | None:
        client = await self._ensure_connected()
        value = await client.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            # Return raw value if not JSON
            return value

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        client = await self._ensure_connected()
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        serialized = value if isinstance(value, str) else json.dumps(value)
        await client.set(key, serialized, ex=ttl)

    async def invalidate(self, pattern: str) -> int:
        """Invalidate matching keys using SCAN rather than KEYS."""
        client = await self._ensure_connected()
        deleted_count = 0

        cursor = 0
        while True:
            cursor, keys = await client.scan(cursor=cursor, match=pattern, count=100)
            if keys:
                deleted_count += await client.delete(*keys)
            if cursor == 0:
                break

        return deleted_count

    async def exists(self, key: str) -> bool:
        client = await self._ensure_connected()
        return bool(await client.exists(key))

    async def delete(self, key: str) -> bool:
        client = await self._ensure_connected()
        result = await client.delete(key)
        return result > 0

    @property
    def default_ttl(self) -> int:
        """Get the default TTL in seconds."""
        return self._default_ttl


class InMemoryCacheService(CacheService):
    """Process-local cache backed by a TTL-aware LRU."""

    def __init__(self, max_size: int = 100, default_ttl: int = 3600) -> None:
        self._cache = LRUCache(max_size=max_size, ttl_seconds=default_ttl)

    async def get(self, key: str) -> Any | None:
        return self._cache.get(key)

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        self._cache.set(key, value, ttl_seconds=ttl_seconds)

    async def invalidate(self, pattern: str) -> int:
        return self._cache.delete_matching(pattern)

    async def exists(self, key: str) -> bool:
        return self._cache.get(key) is not None

    async def delete(self, key: str) -> bool:
        return self._cache.delete(key)


def create_cache_service(redis_url: str = "", default_ttl: int = 3600) -> CacheService:
    """Redis when a URL is configured, otherwise the in-process cache."""
    if redis_url:
        return RedisCacheService(redis_url=redis_url, default_ttl=default_ttl)
    return InMemoryCacheService(default_ttl=default_ttl)
