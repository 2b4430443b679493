"""Multi-city itinerary construction.

Sequences day assembly city by city, day by day, with one used-places registry
shared across the whole trip so nothing is scheduled twice, then wraps the
days into an Itinerary.

Pools are expected fully fetched: this module performs no I/O and runs
strictly sequentially because every window depends on the registry and budget
updates of the windows before it.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Mapping

from planner.models import (
    BudgetBreakdown,
    CityPools,
    DayPlan,
    Itinerary,
    TripContext,
    TripMetadata,
)
from planner.services.budget import resolve_daily_budget
from planner.services.category_filter import (
    DEFAULT_PROFILE,
    expand_categories,
    filter_by_relevance,
    get_style_profile,
)
from planner.services.day_planner import DayPools, DaySettings, assemble_day
from planner.services.selector import BuildState

logger = logging.getLogger(__name__)

DESTINATION_SEPARATOR = " → "


def resolve_day_settings(context: TripContext, daily_budget: float) -> DaySettings:
    """Pacing and activity level from the context, else from the travel style."""
    profile = get_style_profile(context.travel_style) or DEFAULT_PROFILE
    return DaySettings(
        party_size=context.party_size,
        daily_budget=daily_budget,
        pacing=context.pacing or profile.pacing,
        activity_level=context.activity_level or profile.activity_level,
        seed=context.seed,
    )


def prepare_city_pools(pools: CityPools, categories: list[str]) -> DayPools:
    """Relevance-filter a city's activities once for all of its days."""
    return DayPools(
        activities=filter_by_relevance(pools.activities, categories),
        dining=list(pools.dining),
        lodging=list(pools.lodging),
    )


def build_days(
    context: TripContext,
    pools_by_city: Mapping[str, CityPools],
    settings: DaySettings,
    categories: list[str],
    state: BuildState | None = None,
) -> list[DayPlan]:
    """Day plans for every city in route order, numbered 1..N across cities.

    Cities without pools are skipped; numbering continues without gaps.
    """
    state = state or BuildState()
    days: list[DayPlan] = []
    day_number = 1

    for stop in context.cities:
        pools = pools_by_city.get(stop.name)
        if pools is None:
            logger.warning(f"[BUILDER] No pools for {stop.name}, skipping {stop.days} day(s)")
            continue

        day_pools = prepare_city_pools(pools, categories)
        logger.info(
            f"[BUILDER] {stop.name}: {stop.days} day(s), {len(day_pools.activities)} activities, "
            f"{len(day_pools.dining)} dining, {len(day_pools.lodging)} lodging"
        )
        for _ in range(stop.days):
            days.append(assemble_day(day_number, day_pools, settings, state, city=stop.name))
            day_number += 1

    return days


def aggregate_itinerary(
    context: TripContext,
    days: list[DayPlan],
    preferences: list[str],
    budget: BudgetBreakdown | None = None,
) -> Itinerary:
    """Wrap day plans and trip metadata into the final itinerary."""
    now = datetime.now(timezone.utc)
    metadata = TripMetadata(
        destination=DESTINATION_SEPARATOR.join(stop.name for stop in context.cities),
        duration=context.day_count,
        preferences=preferences,
        travel_style=context.travel_style,
        party_size=context.party_size,
        start_date=context.start_date,
        budget=budget,
    )
    return Itinerary(
        id=str(uuid.uuid4()),
        trip_metadata=metadata,
        days=days,
        created_at=now,
        updated_at=now,
    )


def build_itinerary(
    context: TripContext,
    pools_by_city: Mapping[str, CityPools],
) -> Itinerary:
    """Build a complete itinerary for a trip from already-fetched pools.

    Never raises for missing or thin data: missing cities are skipped and
    empty pools produce empty windows.
    """
    daily_budget, breakdown = resolve_daily_budget(context)
    settings = resolve_day_settings(context, daily_budget)
    categories = expand_categories(context.travel_style, context.preferences)

    logger.info(
        f"[BUILDER] Building {context.day_count}-day trip "
        f"{DESTINATION_SEPARATOR.join(stop.name for stop in context.cities)} "
        f"for {context.party_size}, {settings.pacing.value}/{settings.activity_level.value}, "
        f"{daily_budget:.2f}/person/day"
    )

    state = BuildState()
    days = build_days(context, pools_by_city, settings, categories, state)

    logger.info(
        f"[BUILDER] Done: {len(days)} day(s), "
        f"{sum(len(day.visits) for day in days)} visit(s), {len(state.registry)} unique place(s)"
    )
    return aggregate_itinerary(context, days, categories, breakdown)
