"""Markdown rendering of itineraries for chat and text surfaces."""

from planner.models import DayPlan, Itinerary, TimePeriod, TimeWindow

DESCRIPTION_LIMIT = 100


def _money(amount: float) -> str:
    return f"${round(amount):,}"


def _truncate(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


def render_window(window: TimeWindow) -> list[str]:
    label = window.period.value.capitalize()
    lines = [f"### {label} ({window.start_time}-{window.end_time})", ""]
    for idx, visit in enumerate(window.activities, start=1):
        lines.append(f"**{idx}. {visit.name}**")
        lines.append(f"   Duration: {visit.duration}")
        if visit.estimated_cost:
            lines.append(f"   Cost: {visit.estimated_cost}")
        if visit.category:
            lines.append(f"   Type: {visit.category.replace('_', ' ')}")
        if visit.description:
            lines.append(f"   {_truncate(visit.description)}")
        lines.append("")
    return lines


def render_day(day: DayPlan) -> list[str]:
    lines = [f"## Day {day.day_number}: {day.title}", ""]
    for window in day.time_slots:
        if not window.activities:
            continue
        lines.extend(render_window(window))
    lines.extend(["---", ""])
    return lines


def group_days_by_city(days: list[DayPlan]) -> dict[str, list[DayPlan]]:
    """Days per city in first-appearance order."""
    grouped: dict[str, list[DayPlan]] = {}
    for day in days:
        grouped.setdefault(day.city or "", []).append(day)
    return grouped


def render_itinerary_markdown(itinerary: Itinerary) -> str:
    """Render an itinerary as markdown.

    Multi-city trips get one header per city; empty windows are left out.
    """
    meta = itinerary.trip_metadata
    travelers = "traveler" if meta.party_size == 1 else "travelers"
    lines = [f"# Your {meta.duration}-Day {meta.destination} Trip", ""]
    if meta.travel_style:
        lines.extend([f"A **{meta.travel_style}** itinerary for {meta.party_size} {travelers}.", ""])

    if meta.budget is not None:
        lines.extend([
            "## Budget Overview",
            f"- **Total Budget**: {_money(meta.budget.total)}",
            f"- **Per Day**: {_money(meta.budget.per_day)}",
            f"- **Activities/Day**: {_money(meta.budget.activities)}",
            "",
        ])
    lines.extend(["---", ""])

    grouped = group_days_by_city(itinerary.days)
    for city, days in grouped.items():
        if len(grouped) > 1 and city:
            lines.extend([f"# {city}", ""])
        for day in days:
            lines.extend(render_day(day))

    total_visits = sum(
        len(window.activities)
        for day in itinerary.days
        for window in day.time_slots
        if window.period != TimePeriod.NIGHT
    )
    lines.append(
        f"Your itinerary includes **{total_visits} activities** across **{len(itinerary.days)} days**."
    )
    return "\n".join(lines) + "\n"
