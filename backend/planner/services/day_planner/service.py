"""Day plan assembly.

A day is split into morning and afternoon (sightseeing), evening (dining) and,
on lodging days, a night window with one place to stay. Window sizes come from
the pacing table scaled by the activity level. Each window is filled by one
call to the selector, which shares the trip-wide used-places registry and the
day's budget.
"""

import logging
import math
import uuid
from dataclasses import dataclass, field
from typing import Sequence

from planner import config
from planner.models import (
    ActivityLevel,
    DayPlan,
    Pacing,
    PointOfInterest,
    TimePeriod,
    TimeWindow,
    Visit,
)
from planner.services.cost_estimator import estimate_visit, parse_cost, resolve_category_label
from planner.services.selector import BuildState, place_key, select_places
from planner.utils.shuffle import day_seed, deterministic_shuffle

logger = logging.getLogger(__name__)

PACING_CAPACITY: dict[Pacing, dict[TimePeriod, int]] = {
    Pacing.RELAXED: {TimePeriod.MORNING: 1, TimePeriod.AFTERNOON: 1, TimePeriod.EVENING: 1},
    Pacing.MODERATE: {TimePeriod.MORNING: 2, TimePeriod.AFTERNOON: 2, TimePeriod.EVENING: 1},
    Pacing.FAST: {TimePeriod.MORNING: 2, TimePeriod.AFTERNOON: 3, TimePeriod.EVENING: 2},
}

ACTIVITY_MULTIPLIER: dict[ActivityLevel, float] = {
    ActivityLevel.LOW: 0.8,
    ActivityLevel.MEDIUM: 1.0,
    ActivityLevel.HIGH: 1.2,
}

WINDOW_HOURS: dict[TimePeriod, tuple[str, str]] = {
    TimePeriod.MORNING: ("09:00", "12:00"),
    TimePeriod.AFTERNOON: ("14:00", "18:00"),
    TimePeriod.EVENING: ("19:00", "22:00"),
    TimePeriod.NIGHT: ("22:00", "23:59"),
}

DAY_TITLES: tuple[str, ...] = (
    "Arrival & First Impressions",
    "City Discovery",
    "Cultural Journey",
    "Local Adventures",
    "Hidden Treasures",
    "Art & Heritage",
    "Nature & Relaxation",
)

LODGING_PER_NIGHT = 1

# Shuffle salts so the three pools of a day never share a seed.
_ACTIVITY_SALT = 0
_DINING_SALT = 1
_LODGING_SALT = 2

_VISIT_NAMESPACE = uuid.UUID("6f1f4e0a-3c57-4b8e-9a59-2a43d8f0c2b1")


@dataclass
class DayPools:
    """Candidates available to one city's days, already relevance-filtered."""
    activities: list[PointOfInterest] = field(default_factory=list)
    dining: list[PointOfInterest] = field(default_factory=list)
    lodging: list[PointOfInterest] = field(default_factory=list)


@dataclass
class DaySettings:
    """Per-trip knobs used for every day."""
    party_size: int
    daily_budget: float
    pacing: Pacing = Pacing.MODERATE
    activity_level: ActivityLevel = ActivityLevel.MEDIUM
    seed: int = 0
    lodging_interval: int = field(default_factory=lambda: config.LODGING_INTERVAL_DAYS)

    @property
    def budget_ceiling(self) -> float:
        return self.daily_budget * self.party_size


def window_capacities(pacing: Pacing, activity_level: ActivityLevel) -> dict[TimePeriod, int]:
    """Places per window: pacing base times activity multiplier, halves up, at least 1."""
    base = PACING_CAPACITY[pacing]
    multiplier = ACTIVITY_MULTIPLIER[activity_level]
    return {
        period: max(1, math.floor(count * multiplier + 0.5))
        for period, count in base.items()
    }


def day_title(day_number: int) -> str:
    """Theme title for a day; long trips reuse the last one."""
    return DAY_TITLES[min(day_number - 1, len(DAY_TITLES) - 1)]


def is_lodging_day(day_number: int, interval: int) -> bool:
    """Day 1, then every ``interval`` days (1, 4, 7, ... for 3)."""
    if interval <= 0:
        return day_number == 1
    return (day_number - 1) % interval == 0


def to_visit(poi: PointOfInterest, day_number: int, period: TimePeriod) -> Visit:
    """Build the scheduled visit for a selected place."""
    estimate = estimate_visit(poi.categories)
    key = place_key(poi)
    label = resolve_category_label(poi.categories)
    return Visit(
        id=str(uuid.uuid5(_VISIT_NAMESPACE, f"{day_number}:{period.value}:{key}")),
        place_key=key,
        poi_id=poi.id,
        name=poi.name,
        location=poi.coordinates,
        duration=estimate.duration,
        estimated_cost=estimate.cost,
        category=label,
        categories=list(poi.categories),
        description=poi.description or f"{label.replace('_', ' ').capitalize()} worth a visit",
        rating=poi.rating,
        image_url=poi.image_url,
    )


def build_window(
    period: TimePeriod,
    target: int,
    candidates: Sequence[PointOfInterest],
    settings: DaySettings,
    state: BuildState,
    day_number: int,
) -> TimeWindow:
    """Fill one window through the selector."""
    start, end = WINDOW_HOURS[period]
    selection = select_places(target, candidates, settings.party_size, state)
    return TimeWindow(
        period=period,
        start_time=start,
        end_time=end,
        activities=[to_visit(poi, day_number, period) for poi in selection.places],
        scarcity_fallback=selection.used_fallback,
    )


def assemble_day(
    day_number: int,
    pools: DayPools,
    settings: DaySettings,
    state: BuildState,
    city: str | None = None,
) -> DayPlan:
    """Assemble the plan for one day.

    Resets the day's budget, orders each pool with a day-specific seed and
    fills morning, afternoon, evening and (on lodging days) night windows.
    """
    state.budget.reset(settings.budget_ceiling)
    capacities = window_capacities(settings.pacing, settings.activity_level)

    activities = deterministic_shuffle(
        pools.activities, day_seed(settings.seed, day_number, _ACTIVITY_SALT)
    )
    dining = deterministic_shuffle(
        pools.dining, day_seed(settings.seed, day_number, _DINING_SALT)
    )

    windows = [
        build_window(TimePeriod.MORNING, capacities[TimePeriod.MORNING],
                     activities, settings, state, day_number),
        build_window(TimePeriod.AFTERNOON, capacities[TimePeriod.AFTERNOON],
                     activities, settings, state, day_number),
        build_window(TimePeriod.EVENING, capacities[TimePeriod.EVENING],
                     dining, settings, state, day_number),
    ]

    if pools.lodging and is_lodging_day(day_number, settings.lodging_interval):
        lodging = deterministic_shuffle(
            pools.lodging, day_seed(settings.seed, day_number, _LODGING_SALT)
        )
        night = build_window(TimePeriod.NIGHT, LODGING_PER_NIGHT,
                             lodging, settings, state, day_number)
        if night.activities:
            windows.append(night)

    estimated_cost = sum(
        parse_cost(visit.estimated_cost) for window in windows for visit in window.activities
    ) * settings.party_size

    empty = [window.period.value for window in windows if not window.activities]
    if empty:
        logger.info(f"[DAY] Day {day_number} ({city or 'n/a'}): empty windows {empty}")

    return DayPlan(
        day_number=day_number,
        title=day_title(day_number),
        time_slots=windows,
        city=city,
        estimated_cost=estimated_cost,
        budget_ceiling=settings.budget_ceiling,
    )
