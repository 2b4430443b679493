"""Cost Estimator — duration buckets and cost ranges from category tags."""

from .service import (
    COST_RULES,
    DEFAULT_COST_ESTIMATE,
    CostRule,
    VisitEstimate,
    estimate_cost,
    estimate_duration,
    estimate_visit,
    parse_cost,
    per_person_cost,
    resolve_category_label,
)

__all__ = [
    "COST_RULES",
    "DEFAULT_COST_ESTIMATE",
    "CostRule",
    "VisitEstimate",
    "estimate_cost",
    "estimate_duration",
    "estimate_visit",
    "parse_cost",
    "per_person_cost",
    "resolve_category_label",
]
