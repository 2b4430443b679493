"""Data models for the itinerary engine."""

from .core import (
    ActivityLevel,
    BudgetBreakdown,
    BudgetMode,
    CityPools,
    CityStop,
    Coordinates,
    DayPlan,
    Itinerary,
    Pacing,
    PointOfInterest,
    TimePeriod,
    TimeWindow,
    TravelStyle,
    TripBudget,
    TripContext,
    TripMetadata,
    Visit,
)
from .errors import AppError, ErrorCode, PlanWarning

__all__ = [
    "ActivityLevel",
    "AppError",
    "BudgetBreakdown",
    "BudgetMode",
    "CityPools",
    "CityStop",
    "Coordinates",
    "DayPlan",
    "ErrorCode",
    "Itinerary",
    "Pacing",
    "PlanWarning",
    "PointOfInterest",
    "TimePeriod",
    "TimeWindow",
    "TravelStyle",
    "TripBudget",
    "TripContext",
    "TripMetadata",
    "Visit",
]
