"""Trip budget allocation.

Splits a trip budget into per-day amounts per category. The events share per
day is the activities budget: what each traveler may spend on sights per day,
scaled by party size into the selector's daily ceiling.
"""

import logging

from planner.models import BudgetBreakdown, BudgetMode, TripBudget, TripContext

logger = logging.getLogger(__name__)


def category_amounts(budget: TripBudget, mode: BudgetMode) -> dict[str, float]:
    """Absolute trip-wide amount for each category.

    In capped mode the category values are percentages of the total, in
    flexible mode they are amounts already.
    """
    values = {
        "travel": budget.travel,
        "accommodation": budget.accommodation,
        "food": budget.food,
        "events": budget.events,
    }
    if mode == BudgetMode.CAPPED:
        return {name: budget.total * pct / 100 for name, pct in values.items()}
    return dict(values)


def calculate_daily_budget(
    budget: TripBudget,
    total_days: int,
    mode: BudgetMode = BudgetMode.CAPPED,
) -> BudgetBreakdown:
    """Per-day breakdown of a trip budget."""
    days = max(1, total_days)
    amounts = category_amounts(budget, mode)

    if mode == BudgetMode.CAPPED:
        allocated = sum(amounts.values())
        if abs(allocated - budget.total) > 0.01:
            logger.warning(
                f"[BUDGET] Capped allocation covers {allocated:.2f} of {budget.total:.2f}"
            )

    per_day = {name: amount / days for name, amount in amounts.items()}
    return BudgetBreakdown(
        total=budget.total,
        per_day=budget.total / days,
        travel=per_day["travel"],
        accommodation=per_day["accommodation"],
        food=per_day["food"],
        events=per_day["events"],
        activities=per_day["events"],
        mode=mode,
    )


def resolve_daily_budget(context: TripContext) -> tuple[float, BudgetBreakdown | None]:
    """Daily activity budget per person, plus the breakdown when a trip budget is given.

    An explicit ``daily_budget`` wins; otherwise the per-day events share of the
    trip budget is used as the per-person amount. Without either, the budget is 0 and
    only free places are affordable.
    """
    breakdown = None
    if context.budget is not None:
        breakdown = calculate_daily_budget(context.budget, context.day_count, context.budget_mode)

    if context.daily_budget is not None:
        return context.daily_budget, breakdown
    if breakdown is not None:
        return breakdown.activities, breakdown

    logger.warning("[BUDGET] No budget given, only free places will be scheduled")
    return 0.0, None
