"""Unit tests for the cache layer."""

import pytest

from planner.services.cache import (
    CacheService,
    InMemoryCacheService,
    RedisCacheService,
    create_cache_service,
)
from planner.utils.cache import LRUCache


class TestLRUCache:
    def test_get_and_set(self) -> None:
        cache = LRUCache(max_size=2)
        cache.set("a", 1)
        assert cache.get("a") == 1
        assert cache.get("missing") is None

    def test_evicts_least_recently_used(self) -> None:
        cache = LRUCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)
        assert cache.get("b") is None
        assert cache.get("a") == 1
        assert len(cache) == 2

    def test_expired_entries_are_dropped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        now = [1000.0]
        monkeypatch.setattr("planner.utils.cache.time.monotonic", lambda: now[0])
        cache = LRUCache(ttl_seconds=60)
        cache.set("a", 1)
        cache.set("b", 2, ttl_seconds=600)
        now[0] += 61
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_delete_matching(self) -> None:
        cache = LRUCache()
        cache.set("pools:lisbon", {})
        cache.set("pools:porto", {})
        cache.set("other", {})
        assert cache.delete_matching("pools:*") == 2
        assert len(cache) == 1


class TestCacheKeys:
    def test_pools_key_is_normalized(self) -> None:
        assert CacheService.build_pools_key(" Lisbon ") == "pools:lisbon"
        assert CacheService.build_pools_key("LISBON") == CacheService.build_pools_key("lisbon")


class TestInMemoryCacheService:
    def setup_method(self) -> None:
        self.cache = InMemoryCacheService()

    @pytest.mark.asyncio
    async def test_round_trip(self) -> None:
        await self.cache.set("pools:lisbon", {"dining": []})
        assert await self.cache.get("pools:lisbon") == {"dining": []}
        assert await self.cache.exists("pools:lisbon")

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        await self.cache.set("k", "v")
        assert await self.cache.delete("k") is True
        assert await self.cache.delete("k") is False
        assert not await self.cache.exists("k")

    @pytest.mark.asyncio
    async def test_invalidate(self) -> None:
        await self.cache.set("pools:lisbon", {})
        await self.cache.set("pools:rome", {})
        assert await self.cache.invalidate("pools:*") == 2
        assert await self.cache.get("pools:rome") is None


class TestCreateCacheService:
    def test_in_memory_without_url(self) -> None:
        assert isinstance(create_cache_service(""), InMemoryCacheService)

    def test_redis_with_url(self) -> None:
        service = create_cache_service("redis://localhost:6379", default_ttl=60)
        assert isinstance(service, RedisCacheService)
        assert service.default_ttl == 60
