"""Planner Services.

Service layer components:
- Cost Estimator: duration buckets and cost ranges from category tags
- Category Filter: travel style profiles and relevance filtering
- Selector: budget-constrained greedy selection with scarcity fallback
- Day Planner: morning/afternoon/evening/night windows for one day
- Itinerary Builder: multi-city orchestration and aggregation
- Budget: per-day amounts from a trip budget
- Places: candidate pool providers (static, OpenTripMap)
- Cache: Redis-based caching with in-memory LRU fallback
- Renderer: markdown output
"""

from .cache import CacheService, InMemoryCacheService, RedisCacheService, create_cache_service
from .itinerary_builder import build_itinerary
from .places import (
    OpenTripMapPlacesProvider,
    PlacesProvider,
    PlacesProviderError,
    StaticPlacesProvider,
    fetch_city_pools,
)
from .renderer import render_itinerary_markdown

__all__ = [
    # Cache
    "CacheService",
    "InMemoryCacheService",
    "RedisCacheService",
    "create_cache_service",
    # Builder
    "build_itinerary",
    # Places
    "OpenTripMapPlacesProvider",
    "PlacesProvider",
    "PlacesProviderError",
    "StaticPlacesProvider",
    "fetch_city_pools",
    # Rendering
    "render_itinerary_markdown",
]
