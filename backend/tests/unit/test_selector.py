"""Unit tests for budget-constrained place selection."""

import pytest

from conftest import build_poi
from planner.services.selector import (
    BudgetState,
    BuildState,
    UsedPlacesRegistry,
    place_key,
    scarcity_threshold,
    select_places,
)


def _state(ceiling: float) -> BuildState:
    state = BuildState()
    state.budget.reset(ceiling)
    return state


class TestPlaceKey:
    def test_normalizes_name(self, make_poi) -> None:
        a = make_poi("Torre  de Belém", poi_id="a")
        b = make_poi("torre de belém", poi_id="b")
        assert place_key(a) == place_key(b)

    def test_coordinates_distinguish_places(self, make_poi) -> None:
        a = make_poi("Café", lat=38.70)
        b = make_poi("Café", lat=38.71)
        assert place_key(a) != place_key(b)


class TestUsedPlacesRegistry:
    def test_register_and_lookup(self, make_poi) -> None:
        registry = UsedPlacesRegistry()
        poi = make_poi("Sé")
        assert not registry.is_used(poi)
        registry.register(place_key(poi))
        assert registry.is_used(poi)
        assert place_key(poi) in registry
        assert len(registry) == 1
        assert registry.keys == frozenset({place_key(poi)})


class TestBudgetState:
    def test_free_always_affordable(self) -> None:
        budget = BudgetState()
        budget.reset(0)
        assert budget.can_afford(0)
        assert not budget.can_afford(1)

    def test_spend(self) -> None:
        budget = BudgetState()
        budget.reset(50)
        budget.spend(20)
        assert budget.remaining == 30
        assert budget.spent == 20
        assert budget.can_afford(30)
        assert not budget.can_afford(31)


class TestScarcityThreshold:
    def test_half_of_target(self) -> None:
        assert scarcity_threshold(4) == 2
        assert scarcity_threshold(5) == 2

    def test_minimum_one(self) -> None:
        assert scarcity_threshold(1) == 1
        assert scarcity_threshold(3) == 1

    def test_overrides(self) -> None:
        assert scarcity_threshold(6, divisor=3) == 2
        assert scarcity_threshold(1, minimum=0) == 0

    def test_zero_divisor_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            scarcity_threshold(4, divisor=0)


class TestSelectPlaces:
    """Tests for select_places."""

    def test_picks_up_to_target(self, make_pois) -> None:
        state = _state(1000)
        selection = select_places(3, make_pois("Sight", 10), 1, state)
        assert len(selection.places) == 3
        assert not selection.used_fallback
        assert len(state.registry) == 3

    def test_keeps_candidate_order(self, make_pois) -> None:
        candidates = make_pois("Sight", 5)
        selection = select_places(2, candidates, 1, _state(1000))
        assert selection.places == candidates[:2]

    def test_zero_target(self, make_pois) -> None:
        state = _state(1000)
        selection = select_places(0, make_pois("Sight", 3), 1, state)
        assert selection.places == []
        assert len(state.registry) == 0

    def test_spends_cost_times_party(self, make_pois) -> None:
        state = _state(100)
        select_places(2, make_pois("Sight", 5), 3, state)
        # Monuments estimate 15 per person.
        assert state.budget.spent == 90
        assert state.budget.remaining == 10

    def test_skips_unaffordable_and_continues(self, make_poi) -> None:
        museum = make_poi("Museu", ("museums",), lat=38.71)
        monument = make_poi("Padrão", lat=38.72)
        state = _state(15)
        selection = select_places(2, [museum, monument], 1, state)
        # One pick with the target at 2 is not scarce.
        assert selection.places == [monument]
        assert not selection.used_fallback

    def test_never_exceeds_budget(self, make_pois) -> None:
        state = _state(50)
        selection = select_places(10, make_pois("Sight", 10), 1, state)
        assert len(selection.places) == 3
        assert state.budget.spent <= 50

    def test_free_places_ignore_exhausted_budget(self, make_pois) -> None:
        parks = make_pois("Park", 3, categories=("gardens_and_parks",))
        selection = select_places(3, parks, 2, _state(0))
        assert len(selection.places) == 3

    def test_nothing_affordable_is_empty(self, make_pois) -> None:
        selection = select_places(2, make_pois("Museum", 4, categories=("museums",)), 1, _state(10))
        assert selection.places == []

    def test_skips_registered_places(self, make_pois) -> None:
        candidates = make_pois("Sight", 4)
        state = _state(1000)
        state.registry.register(place_key(candidates[0]))
        selection = select_places(2, candidates, 1, state)
        assert selection.places == candidates[1:3]

    def test_duplicate_candidates_picked_once(self, make_poi) -> None:
        poi = make_poi("Sé")
        twin = make_poi("Sé", poi_id="other_id")
        selection = select_places(2, [poi, twin, poi], 1, _state(1000))
        assert len(selection.places) == 1

    def test_no_repeats_across_windows(self, make_pois) -> None:
        candidates = make_pois("Sight", 6)
        state = _state(1000)
        first = select_places(3, candidates, 1, state)
        second = select_places(3, candidates, 1, state)
        assert not {place_key(p) for p in first.places} & {place_key(p) for p in second.places}
        assert not second.used_fallback


class TestScarcityFallback:
    """Budget 15, party of one: two used free parks and one fresh monument."""

    def setup_method(self) -> None:
        self.parks = [
            build_poi("Jardim A", ("gardens_and_parks",), lat=38.71),
            build_poi("Jardim B", ("gardens_and_parks",), lat=38.72),
        ]
        self.monument = build_poi("Padrão", lat=38.73)
        self.candidates = [*self.parks, self.monument]

    def _state(self) -> BuildState:
        state = _state(15)
        for park in self.parks:
            state.registry.register(place_key(park))
        return state

    def test_fallback_allows_used_places(self) -> None:
        state = self._state()
        selection = select_places(4, self.candidates, 1, state)
        assert selection.used_fallback
        assert len(selection.places) == 3
        assert self.monument in selection.places
        assert state.budget.spent == 15

    def test_threshold_met_without_fallback(self) -> None:
        selection = select_places(3, self.candidates, 1, self._state())
        assert not selection.used_fallback
        assert selection.places == [self.monument]

    def test_fallback_still_enforces_budget(self, make_poi) -> None:
        museums = [make_poi(f"Museu {i}", ("museums",), lat=38.80 + i * 0.01) for i in range(3)]
        state = _state(15)
        for museum in museums:
            state.registry.register(place_key(museum))
        selection = select_places(4, [self.monument, *museums], 1, state)
        assert selection.used_fallback
        assert selection.places == [self.monument]
        assert state.budget.remaining == 0

    def test_fallback_keeps_window_unique(self) -> None:
        state = self._state()
        selection = select_places(4, [*self.candidates, *self.parks], 1, state)
        keys = [place_key(p) for p in selection.places]
        assert len(keys) == len(set(keys))
