"""Visit duration and cost estimation from category tags.

Providers rarely return prices, so each place gets a per-person cost range and
a duration bucket from a fixed priority table keyed on its category tags.
The first row whose keyword appears (case-insensitively) in any tag wins.
"""

import math
import re
from dataclasses import dataclass
from typing import Iterable

DEFAULT_DURATION = "1-2h"
DEFAULT_COST = "$10-30"
DEFAULT_COST_ESTIMATE = 20
DEFAULT_CATEGORY_LABEL = "attraction"

_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class CostRule:
    """One row of the estimation table."""
    keywords: tuple[str, ...]
    duration: str
    cost: str


COST_RULES: tuple[CostRule, ...] = (
    CostRule(("museum",), "2-3h", "$15-25"),
    CostRule(("restaurant", "food"), "1-1.5h", "$20-40"),
    CostRule(("park", "natural"), "1-2h", "Free"),
    CostRule(("monument", "architecture"), "30min-1h", "$10-20"),
)


@dataclass(frozen=True)
class VisitEstimate:
    """Estimated duration and per-person cost of visiting a place."""
    duration: str
    cost: str

    @property
    def cost_value(self) -> int:
        return parse_cost(self.cost)


def _match_rule(categories: Iterable[str]) -> CostRule | None:
    joined = ",".join(categories).lower()
    for rule in COST_RULES:
        if any(keyword in joined for keyword in rule.keywords):
            return rule
    return None


def estimate_visit(categories: Iterable[str]) -> VisitEstimate:
    """Duration bucket and cost range for a place with the given tags."""
    rule = _match_rule(categories)
    if rule is None:
        return VisitEstimate(duration=DEFAULT_DURATION, cost=DEFAULT_COST)
    return VisitEstimate(duration=rule.duration, cost=rule.cost)


def estimate_duration(categories: Iterable[str]) -> str:
    return estimate_visit(categories).duration


def estimate_cost(categories: Iterable[str]) -> str:
    return estimate_visit(categories).cost


def parse_cost(cost: str) -> int:
    """Convert a cost-range string to a single per-person amount.

    - anything mentioning "free" -> 0
    - "$20" -> 20
    - "$20-40" -> 30 (average, halves rounded up)
    - no digits -> DEFAULT_COST_ESTIMATE
    """
    if "free" in cost.lower():
        return 0

    numbers = [int(n) for n in _NUMBER_RE.findall(cost)]
    if not numbers:
        return DEFAULT_COST_ESTIMATE
    if len(numbers) == 1:
        return numbers[0]
    return math.floor(sum(numbers) / len(numbers) + 0.5)


def per_person_cost(categories: Iterable[str]) -> int:
    """Numeric per-person estimate for a place with the given tags."""
    return parse_cost(estimate_cost(categories))


def resolve_category_label(categories: Iterable[str]) -> str:
    """Display category for a visit: its first tag, else a generic label."""
    for category in categories:
        if category:
            return category
    return DEFAULT_CATEGORY_LABEL
