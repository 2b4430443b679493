"""Core data models for the itinerary engine.

This module contains the Pydantic models used throughout the planner for
representing points of interest, scheduled visits, time windows, day plans,
trip context and the final itinerary.

Serialized field names are camelCase (``dayNumber``, ``timeSlots``,
``tripMetadata``); every model also accepts snake_case on input.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting both spellings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimePeriod(str, Enum):
    """Time windows a day is split into."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class Pacing(str, Enum):
    """How densely each window is packed."""

    RELAXED = "relaxed"
    MODERATE = "moderate"
    FAST = "fast"


class ActivityLevel(str, Enum):
    """Multiplier applied on top of pacing."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TravelStyle(str, Enum):
    """Travel styles with a known category profile."""

    LEISURE = "leisure"
    BUSINESS = "business"
    ADVENTURE = "adventure"
    CULTURAL = "cultural"
    FAMILY = "family"
    SOLO = "solo"
    FOODIE = "foodie"
    RELAXATION = "relaxation"
    ROMANTIC = "romantic"


class BudgetMode(str, Enum):
    """How the category allocation of a trip budget is expressed.

    - capped: category values are percentages of the total
    - flexible: category values are absolute amounts
    """

    CAPPED = "capped"
    FLEXIBLE = "flexible"


class Coordinates(CamelModel):
    """Geographic coordinates with validation.

    Latitude must be between -90 and 90 degrees.
    Longitude must be between -180 and 180 degrees.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class PointOfInterest(CamelModel):
    """A place that can be scheduled into an itinerary.

    Points are sourced externally (OpenTripMap, a static catalog, a test
    fixture) and never mutated by the planner.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Provider identifier")
    name: str = Field(..., min_length=1, description="Display name of the place")
    coordinates: Coordinates = Field(..., description="Geographic location")
    categories: tuple[str, ...] = Field(
        default=(), description="Category tags, e.g. ('museums', 'cultural')"
    )
    rating: Optional[float] = Field(None, description="Provider rating")
    description: Optional[str] = Field(None, description="Short description")
    image_url: Optional[str] = Field(None, description="Image URL")


class CityPools(CamelModel):
    """Candidate pools for one city, partitioned by purpose."""

    attractions: list[PointOfInterest] = Field(default_factory=list)
    culture: list[PointOfInterest] = Field(default_factory=list)
    nature: list[PointOfInterest] = Field(default_factory=list)
    dining: list[PointOfInterest] = Field(default_factory=list)
    lodging: list[PointOfInterest] = Field(default_factory=list)

    @property
    def activities(self) -> list[PointOfInterest]:
        """Attractions, culture and nature in that order, first occurrence kept."""
        seen: set[str] = set()
        merged: list[PointOfInterest] = []
        for poi in [*self.attractions, *self.culture, *self.nature]:
            if poi.id in seen:
                continue
            seen.add(poi.id)
            merged.append(poi)
        return merged

    @property
    def total(self) -> int:
        return len(self.activities) + len(self.dining) + len(self.lodging)


class Visit(CamelModel):
    """A point of interest scheduled into a time window."""

    id: str = Field(..., description="Unique visit identifier")
    place_key: str = Field(..., description="Identifier used for repeat avoidance")
    poi_id: str = Field(..., description="Provider identifier of the place")
    name: str
    location: Coordinates
    duration: str = Field(..., description="Duration bucket, e.g. '1-2h'")
    estimated_cost: str = Field(..., description="Per-person cost range, e.g. '$10-30'")
    category: str = Field(..., description="Resolved display category")
    categories: list[str] = Field(default_factory=list)
    description: str
    rating: Optional[float] = None
    image_url: Optional[str] = None
    completed: bool = Field(default=False, description="Set by the owner after the visit")


class TimeWindow(CamelModel):
    """One period of a day holding its ordered visits."""

    period: TimePeriod
    start_time: str
    end_time: str
    activities: list[Visit] = Field(default_factory=list)
    scarcity_fallback: bool = Field(
        default=False, description="Whether repeats were allowed to fill this window"
    )


class DayPlan(CamelModel):
    """The full schedule for one day of the trip."""

    day_number: int = Field(..., ge=1, description="Day number, unique across the trip")
    title: str
    time_slots: list[TimeWindow] = Field(default_factory=list)
    city: Optional[str] = Field(None, description="City this day is spent in")
    estimated_cost: int = Field(default=0, description="Estimated spend for the party")
    budget_ceiling: float = Field(default=0.0, description="Spending ceiling for the party")

    @property
    def visits(self) -> list[Visit]:
        return [visit for slot in self.time_slots for visit in slot.activities]


class TripBudget(CamelModel):
    """Trip budget with a per-category allocation."""

    total: float = Field(..., ge=0)
    travel: float = Field(default=25, ge=0)
    accommodation: float = Field(default=25, ge=0)
    food: float = Field(default=25, ge=0)
    events: float = Field(default=25, ge=0)


class BudgetBreakdown(CamelModel):
    """Per-day amounts derived from a trip budget."""

    total: float
    per_day: float
    travel: float
    accommodation: float
    food: float
    events: float
    activities: float
    mode: BudgetMode = BudgetMode.CAPPED


class CityStop(CamelModel):
    """A city on the route and how many days are spent there."""

    name: str = Field(..., min_length=1)
    days: int = Field(..., ge=1)


class TripContext(CamelModel):
    """Trip-level constraints handed to the builder."""

    cities: list[CityStop] = Field(..., min_length=1)
    total_days: Optional[int] = Field(None, ge=1)
    start_date: Optional[date] = None
    party_size: int = Field(default=1, ge=1)
    travel_style: str = Field(default=TravelStyle.LEISURE.value)
    daily_budget: Optional[float] = Field(
        None, ge=0, description="Activity budget per person per day"
    )
    budget_mode: BudgetMode = BudgetMode.CAPPED
    budget: Optional[TripBudget] = None
    pacing: Optional[Pacing] = None
    activity_level: Optional[ActivityLevel] = None
    preferences: list[str] = Field(default_factory=list)
    seed: int = Field(default=0, description="Base seed for deterministic ordering")

    @model_validator(mode="after")
    def check_total_days(self) -> "TripContext":
        if self.total_days is not None and self.total_days != self.day_count:
            raise ValueError(
                f"total_days ({self.total_days}) does not match the city days ({self.day_count})"
            )
        return self

    @property
    def day_count(self) -> int:
        """Trip length, always the sum of the per-city days."""
        return sum(city.days for city in self.cities)


class TripMetadata(CamelModel):
    """Summary of the trip an itinerary was built for."""

    destination: str
    duration: int
    preferences: list[str] = Field(default_factory=list)
    travel_style: Optional[str] = None
    party_size: int = 1
    start_date: Optional[date] = None
    budget: Optional[BudgetBreakdown] = None


class Itinerary(CamelModel):
    """A complete multi-day itinerary."""

    id: str = Field(..., description="Unique identifier for the itinerary")
    trip_metadata: TripMetadata
    days: list[DayPlan] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
