"""API routes for the itinerary planner.

The HTTP layer only validates input, gathers candidate pools and hands them to
the builder:
- Pools supplied in the request are used as-is
- Missing cities are fetched through the configured places provider
  (OpenTripMap when an API key is set), concurrently
- Cities that still have no pools are skipped by the builder and reported as
  warnings
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from planner import config
from planner.models import (
    AppError,
    CityPools,
    ErrorCode,
    Itinerary,
    PlanWarning,
    TripContext,
)
from planner.services import (
    CacheService,
    OpenTripMapPlacesProvider,
    PlacesProvider,
    RedisCacheService,
    build_itinerary,
    create_cache_service,
    fetch_city_pools,
    render_itinerary_markdown,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# Request/Response models
class CreateItineraryRequest(BaseModel):
    """Trip constraints plus any pools the caller already has."""
    trip: TripContext
    pools: dict[str, CityPools] = Field(default_factory=dict)


class CreateItineraryResponse(BaseModel):
    """Response model for itinerary creation."""
    success: bool
    itinerary: Optional[Itinerary] = None
    error: Optional[AppError] = None
    warnings: Optional[list[PlanWarning]] = None


class ItineraryMarkdownResponse(BaseModel):
    success: bool
    markdown: Optional[str] = None
    error: Optional[AppError] = None
    warnings: Optional[list[PlanWarning]] = None


# Service instances
_cache_service: CacheService | None = None
_places_provider: PlacesProvider | None = None


def get_cache_service() -> CacheService:
    global _cache_service
    if _cache_service is None:
        _cache_service = create_cache_service(config.REDIS_URL, config.PLACES_CACHE_TTL)
    return _cache_service


def get_places_provider() -> PlacesProvider | None:
    """The configured provider, or None when no API key is set."""
    global _places_provider
    if _places_provider is None and config.OPENTRIPMAP_API_KEY:
        _places_provider = OpenTripMapPlacesProvider(
            api_key=config.OPENTRIPMAP_API_KEY,
            radius_m=config.OPENTRIPMAP_RADIUS_M,
            limit=config.OPENTRIPMAP_LIMIT,
            timeout=config.PLACES_TIMEOUT_S,
            cache=get_cache_service(),
            cache_ttl=config.PLACES_CACHE_TTL,
        )
    return _places_provider


def set_places_provider(provider: PlacesProvider | None) -> None:
    """Swap the provider (tests, alternative data sources)."""
    global _places_provider
    _places_provider = provider


async def close_services() -> None:
    """Release the provider and the Redis connection if they were created."""
    global _cache_service, _places_provider
    if _places_provider is not None:
        await _places_provider.close()
        _places_provider = None
    if isinstance(_cache_service, RedisCacheService):
        await _cache_service.disconnect()
    _cache_service = None


async def gather_pools(
    request: CreateItineraryRequest,
) -> tuple[dict[str, CityPools], list[PlanWarning]]:
    """Request pools plus provider pools for the remaining cities."""
    pools = dict(request.pools)
    missing = [stop.name for stop in request.trip.cities if stop.name not in pools]

    provider = get_places_provider()
    if missing and provider is not None:
        logger.info(f"[API] Fetching pools for {missing}")
        pools.update(await fetch_city_pools(provider, missing))

    warnings = [
        PlanWarning(
            code=ErrorCode.NO_POIS_FOUND,
            message=f"No places available for {stop.name}, its days were skipped",
            city=stop.name,
        )
        for stop in request.trip.cities
        if stop.name not in pools
    ]
    return pools, warnings


@router.post("/itinerary", response_model=CreateItineraryResponse)
async def create_itinerary(request: CreateItineraryRequest) -> CreateItineraryResponse:
    """Build a day-by-day itinerary for a (possibly multi-city) trip."""
    pools, warnings = await gather_pools(request)
    if len(warnings) == len(request.trip.cities):
        return CreateItineraryResponse(
            success=False,
            error=AppError(
                code=ErrorCode.NO_POIS_FOUND,
                message="No pools for any city in the trip",
                user_message="We couldn't find places for these destinations. Try another city.",
            ),
            warnings=warnings or None,
        )

    itinerary = build_itinerary(request.trip, pools)
    return CreateItineraryResponse(success=True, itinerary=itinerary, warnings=warnings or None)


@router.post("/itinerary/markdown", response_model=ItineraryMarkdownResponse)
async def create_itinerary_markdown(request: CreateItineraryRequest) -> ItineraryMarkdownResponse:
    """Same as ``/itinerary`` but rendered as markdown."""
    result = await create_itinerary(request)
    if not result.success or result.itinerary is None:
        return ItineraryMarkdownResponse(success=False, error=result.error, warnings=result.warnings)
    return ItineraryMarkdownResponse(
        success=True,
        markdown=render_itinerary_markdown(result.itinerary),
        warnings=result.warnings,
    )
