"""Budget-constrained greedy place selection.

Selection walks an already-shuffled candidate list and accepts places that are
not yet used anywhere in the trip and that the party can still afford today.
The shared state (used places, remaining budget) is passed in explicitly and
mutated in place; it lives for exactly one itinerary build.

When the first pass comes up short (fewer than ``max(minimum, target // divisor)``
places), a second pass ignores the used-places registry so the window repeats
a place rather than staying nearly empty. Budget is still enforced there.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from planner import config
from planner.models import PointOfInterest
from planner.services.cost_estimator import per_person_cost

logger = logging.getLogger(__name__)


def place_key(poi: PointOfInterest) -> str:
    """Identifier of a place for repeat avoidance: normalized name + rounded coordinates.

    Providers may hand out different ids for the same place, so the id itself
    is not used.
    """
    name = " ".join(poi.name.lower().split())
    return f"{name}@{poi.coordinates.lat:.5f},{poi.coordinates.lng:.5f}"


class UsedPlacesRegistry:
    """Set of place keys already scheduled during one build. Only grows."""

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def register(self, key: str) -> None:
        self._keys.add(key)

    def is_used(self, poi: PointOfInterest) -> bool:
        return place_key(poi) in self._keys

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(self._keys)


@dataclass
class BudgetState:
    """Running budget for the day currently being assembled."""
    ceiling: float = 0.0
    remaining: float = 0.0

    def reset(self, ceiling: float) -> None:
        self.ceiling = ceiling
        self.remaining = ceiling

    def can_afford(self, cost: float) -> bool:
        return cost == 0 or cost <= self.remaining

    def spend(self, cost: float) -> None:
        self.remaining -= cost

    @property
    def spent(self) -> float:
        return self.ceiling - self.remaining


@dataclass
class BuildState:
    """All mutable state of a single itinerary build."""
    registry: UsedPlacesRegistry = field(default_factory=UsedPlacesRegistry)
    budget: BudgetState = field(default_factory=BudgetState)


@dataclass
class Selection:
    """Places picked for one window."""
    places: list[PointOfInterest]
    used_fallback: bool = False


def scarcity_threshold(
    target: int,
    divisor: int | None = None,
    minimum: int | None = None,
) -> int:
    """Smallest first-pass result that does not trigger the fallback pass."""
    divisor = config.SCARCITY_DIVISOR if divisor is None else divisor
    if divisor < 1:
        raise ValueError(f"Scarcity divisor must be at least 1, got {divisor}")
    minimum = config.SCARCITY_MIN if minimum is None else minimum
    return max(minimum, target // divisor)


def select_places(
    target: int,
    candidates: Sequence[PointOfInterest],
    party_size: int,
    state: BuildState,
) -> Selection:
    """Greedily pick up to ``target`` affordable, unused places.

    Accepted places are registered and their cost (per-person estimate times
    party size) is deducted from ``state.budget``. An empty selection is a
    valid result when nothing is affordable.
    """
    if target <= 0:
        return Selection(places=[])

    registry = state.registry
    budget = state.budget
    selected: list[PointOfInterest] = []
    picked: set[str] = set()

    for poi in candidates:
        if len(selected) >= target:
            break
        key = place_key(poi)
        if key in registry or key in picked:
            continue
        cost = per_person_cost(poi.categories) * party_size
        if not budget.can_afford(cost):
            continue
        registry.register(key)
        picked.add(key)
        budget.spend(cost)
        selected.append(poi)

    if len(selected) >= scarcity_threshold(target):
        return Selection(places=selected)

    # Relaxed pass: previously used places are allowed again.
    first_pass = len(selected)
    for poi in candidates:
        if len(selected) >= target:
            break
        key = place_key(poi)
        if key in picked:
            continue
        cost = per_person_cost(poi.categories) * party_size
        if not budget.can_afford(cost):
            continue
        registry.register(key)
        picked.add(key)
        budget.spend(cost)
        selected.append(poi)

    if len(selected) > first_pass:
        logger.info(
            f"[SELECTOR] Scarcity fallback topped up {first_pass} -> {len(selected)} "
            f"of {target} from {len(candidates)} candidates"
        )
    else:
        logger.debug(
            f"[SELECTOR] Scarcity fallback found nothing more ({first_pass} of {target})"
        )
    return Selection(places=selected, used_fallback=True)
