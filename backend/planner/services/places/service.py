"""Places providers: where city candidate pools come from.

The itinerary builder only ever sees finished ``CityPools``. Providers fetch
them (possibly concurrently across cities) and hand them over read-only.

- StaticPlacesProvider: in-memory pools (catalogs, fixtures, request payloads)
- OpenTripMapPlacesProvider: OpenTripMap geoname + radius search, one request
  per pool kind, cached per city
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

import httpx

from planner.models import CityPools, Coordinates, PointOfInterest
from planner.services.cache import CacheService

logger = logging.getLogger(__name__)


class PlacesProviderError(Exception):
    """Raised when a provider cannot produce pools for a city."""

    def __init__(self, city: str, message: str) -> None:
        super().__init__(f"{city}: {message}")
        self.city = city


class PlacesProvider(ABC):
    """Abstract base class for city pool providers."""

    @abstractmethod
    async def get_city_pools(self, city: str) -> Optional[CityPools]:
        """Candidate pools for a city, or None when the city is unknown."""
        pass

    async def close(self) -> None:
        pass


class StaticPlacesProvider(PlacesProvider):
    """Serves pools held in memory. City lookup ignores case and padding."""

    def __init__(self, pools: Mapping[str, CityPools]) -> None:
        self._pools = {name.strip().lower(): city_pools for name, city_pools in pools.items()}

    async def get_city_pools(self, city: str) -> Optional[CityPools]:
        return self._pools.get(city.strip().lower())


@dataclass
class OTMPlace:
    """Raw place record from the OpenTripMap radius search."""
    xid: str
    name: str
    lat: float
    lon: float
    kinds: str
    rate: float = 0.0

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Optional["OTMPlace"]:
        point = record.get("point") or {}
        name = (record.get("name") or "").strip()
        if not record.get("xid") or not name or "lat" not in point or "lon" not in point:
            return None
        return cls(
            xid=str(record["xid"]),
            name=name,
            lat=float(point["lat"]),
            lon=float(point["lon"]),
            kinds=record.get("kinds") or "",
            rate=float(record.get("rate") or 0),
        )

    def to_poi(self) -> PointOfInterest:
        return PointOfInterest(
            id=f"otm_{self.xid}",
            name=self.name,
            coordinates=Coordinates(lat=self.lat, lng=self.lon),
            categories=tuple(kind for kind in self.kinds.split(",") if kind),
            rating=self.rate or None,
        )


class OpenTripMapPlacesProvider(PlacesProvider):
    """OpenTripMap client building one city's pools.

    Requests are issued one after another with a short pause, the free tier
    rejects bursts with 429.
    """

    BASE_URL = "https://api.opentripmap.com/0.1/en/places"

    POOL_KINDS = {
        "attractions": "interesting_places",
        "culture": "cultural,museums,theatres_and_entertainments",
        "nature": "natural",
        "dining": "foods",
        "lodging": "accomodations",
    }

    def __init__(
        self,
        api_key: str,
        radius_m: int = 10000,
        limit: int = 30,
        timeout: float = 15.0,
        cache: CacheService | None = None,
        cache_ttl: int = 86400,
        request_delay: float = 0.2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("OpenTripMap API key is required")
        self._api_key = api_key
        self._radius_m = radius_m
        self._limit = limit
        self._timeout = timeout
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._request_delay = request_delay
        self._transport = transport

    async def _cache_get(self, key: str) -> Any | None:
        """Cached value, or None when the cache is missing or unreachable."""
        if self._cache is None:
            return None
        try:
            return await self._cache.get(key)
        except Exception as e:
            logger.warning(f"[PLACES] Cache read failed for {key}, fetching instead: {e}")
            return None

    async def _cache_set(self, key: str, value: Any) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.set(key, value, ttl_seconds=self._cache_ttl)
        except Exception as e:
            logger.warning(f"[PLACES] Cache write failed for {key}: {e}")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def geocode_city(self, client: httpx.AsyncClient, city: str) -> Optional[Coordinates]:
        response = await client.get("/geoname", params={"name": city, "apikey": self._api_key})
        response.raise_for_status()
        data = response.json()
        if data.get("status") != "OK" or "lat" not in data or "lon" not in data:
            logger.info(f"[PLACES] OpenTripMap does not know '{city}'")
            return None
        return Coordinates(lat=data["lat"], lng=data["lon"])

    async def search_kind(
        self,
        client: httpx.AsyncClient,
        center: Coordinates,
        kinds: str,
    ) -> list[PointOfInterest]:
        response = await client.get(
            "/radius",
            params={
                "radius": self._radius_m,
                "lon": center.lng,
                "lat": center.lat,
                "kinds": kinds,
                "limit": self._limit,
                "format": "json",
                "apikey": self._api_key,
            },
        )
        response.raise_for_status()
        records = response.json()
        if not isinstance(records, list):
            return []
        places = [OTMPlace.from_record(record) for record in records if isinstance(record, dict)]
        return [place.to_poi() for place in places if place is not None]

    async def get_city_pools(self, city: str) -> Optional[CityPools]:
        cache_key = CacheService.build_pools_key(city)
        cached = await self._cache_get(cache_key)
        if cached:
            logger.debug(f"[PLACES] Cache hit for {city}")
            return CityPools.model_validate(cached)

        try:
            async with self._client() as client:
                center = await self.geocode_city(client, city)
                if center is None:
                    return None

                found: dict[str, list[PointOfInterest]] = {}
                for pool, kinds in self.POOL_KINDS.items():
                    if found and self._request_delay:
                        await asyncio.sleep(self._request_delay)
                    found[pool] = await self.search_kind(client, center, kinds)
        except httpx.HTTPError as e:
            raise PlacesProviderError(city, f"OpenTripMap request failed: {e}") from e

        pools = CityPools(**found)
        logger.info(
            f"[PLACES] {city}: " + ", ".join(f"{name}={len(items)}" for name, items in found.items())
        )
        await self._cache_set(cache_key, pools.model_dump(mode="json"))
        return pools


async def fetch_city_pools(
    provider: PlacesProvider,
    cities: Iterable[str],
) -> dict[str, CityPools]:
    """Fetch pools for all cities concurrently.

    Cities the provider does not know or fails on are left out; the builder
    skips them.
    """
    names = list(dict.fromkeys(cities))
    results = await asyncio.gather(
        *(provider.get_city_pools(name) for name in names),
        return_exceptions=True,
    )

    pools: dict[str, CityPools] = {}
    for name, result in zip(names, results):
        if isinstance(result, BaseException):
            logger.warning(f"[PLACES] Could not fetch pools for {name}: {result}")
            continue
        if result is None:
            logger.warning(f"[PLACES] No pools for {name}")
            continue
        pools[name] = result
    return pools
