"""Budget-Constrained Selector with its shared build state."""

from .service import (
    BudgetState,
    BuildState,
    Selection,
    UsedPlacesRegistry,
    place_key,
    scarcity_threshold,
    select_places,
)

__all__ = [
    "BudgetState",
    "BuildState",
    "Selection",
    "UsedPlacesRegistry",
    "place_key",
    "scarcity_threshold",
    "select_places",
]
