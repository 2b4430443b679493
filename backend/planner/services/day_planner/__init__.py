"""Day-Plan Assembler — time windows for a single day."""

from .service import (
    ACTIVITY_MULTIPLIER,
    DAY_TITLES,
    PACING_CAPACITY,
    WINDOW_HOURS,
    DayPools,
    DaySettings,
    assemble_day,
    build_window,
    day_title,
    is_lodging_day,
    to_visit,
    window_capacities,
)

__all__ = [
    "ACTIVITY_MULTIPLIER",
    "DAY_TITLES",
    "PACING_CAPACITY",
    "WINDOW_HOURS",
    "DayPools",
    "DaySettings",
    "assemble_day",
    "build_window",
    "day_title",
    "is_lodging_day",
    "to_visit",
    "window_capacities",
]
