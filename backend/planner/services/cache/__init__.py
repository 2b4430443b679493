"""Cache service module: Redis with an in-process LRU fallback."""

from .service import (
    CacheService,
    InMemoryCacheService,
    RedisCacheService,
    create_cache_service,
)

__all__ = [
    "CacheService",
    "InMemoryCacheService",
    "RedisCacheService",
    "create_cache_service",
]
