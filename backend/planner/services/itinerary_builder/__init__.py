"""Multi-City Orchestrator and Itinerary Aggregator."""

from .service import (
    DESTINATION_SEPARATOR,
    aggregate_itinerary,
    build_days,
    build_itinerary,
    prepare_city_pools,
    resolve_day_settings,
)

__all__ = [
    "DESTINATION_SEPARATOR",
    "aggregate_itinerary",
    "build_days",
    "build_itinerary",
    "prepare_city_pools",
    "resolve_day_settings",
]
