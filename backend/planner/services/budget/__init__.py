"""Budget Planner — per-day amounts from a trip budget."""

from .service import calculate_daily_budget, category_amounts, resolve_daily_budget

__all__ = ["calculate_daily_budget", "category_amounts", "resolve_daily_budget"]
