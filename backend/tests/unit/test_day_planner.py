"""Unit tests for day plan assembly."""

import pytest

from conftest import build_pois
from planner.models import ActivityLevel, Pacing, TimePeriod
from planner.services.day_planner import (
    DAY_TITLES,
    DayPools,
    DaySettings,
    assemble_day,
    day_title,
    is_lodging_day,
    to_visit,
    window_capacities,
)
from planner.services.selector import BuildState, place_key


class TestWindowCapacities:
    @pytest.mark.parametrize(
        "pacing,level,expected",
        [
            (Pacing.MODERATE, ActivityLevel.MEDIUM, (2, 2, 1)),
            (Pacing.RELAXED, ActivityLevel.LOW, (1, 1, 1)),
            (Pacing.FAST, ActivityLevel.HIGH, (2, 4, 2)),
            (Pacing.MODERATE, ActivityLevel.LOW, (2, 2, 1)),
            (Pacing.FAST, ActivityLevel.LOW, (2, 2, 2)),
        ],
    )
    def test_table(self, pacing: Pacing, level: ActivityLevel, expected: tuple) -> None:
        capacities = window_capacities(pacing, level)
        assert (
            capacities[TimePeriod.MORNING],
            capacities[TimePeriod.AFTERNOON],
            capacities[TimePeriod.EVENING],
        ) == expected

    def test_never_below_one(self) -> None:
        for pacing in Pacing:
            for level in ActivityLevel:
                assert min(window_capacities(pacing, level).values()) >= 1


class TestDayTitle:
    def test_first_days(self) -> None:
        assert day_title(1) == "Arrival & First Impressions"
        assert day_title(2) == "City Discovery"

    def test_long_trips_reuse_last_title(self) -> None:
        assert day_title(len(DAY_TITLES)) == DAY_TITLES[-1]
        assert day_title(30) == DAY_TITLES[-1]


class TestLodgingDays:
    def test_every_third_day(self) -> None:
        assert [d for d in range(1, 11) if is_lodging_day(d, 3)] == [1, 4, 7, 10]

    def test_every_day(self) -> None:
        assert all(is_lodging_day(d, 1) for d in range(1, 6))

    def test_non_positive_interval_means_first_day_only(self) -> None:
        assert [d for d in range(1, 6) if is_lodging_day(d, 0)] == [1]


class TestToVisit:
    def test_fields(self, make_poi) -> None:
        poi = make_poi("Museu Nacional", ("museums", "cultural"))
        visit = to_visit(poi, 1, TimePeriod.MORNING)
        assert visit.name == "Museu Nacional"
        assert visit.poi_id == poi.id
        assert visit.place_key == place_key(poi)
        assert visit.duration == "2-3h"
        assert visit.estimated_cost == "$15-25"
        assert visit.category == "museums"
        assert visit.categories == ["museums", "cultural"]
        assert visit.description
        assert visit.completed is False

    def test_ids_are_stable_and_distinct(self, make_poi) -> None:
        poi = make_poi("Sé")
        assert to_visit(poi, 1, TimePeriod.MORNING).id == to_visit(poi, 1, TimePeriod.MORNING).id
        assert to_visit(poi, 1, TimePeriod.MORNING).id != to_visit(poi, 2, TimePeriod.MORNING).id


class TestAssembleDay:
    """Tests for assemble_day."""

    def setup_method(self) -> None:
        self.pools = DayPools(
            activities=build_pois("Sight", 30),
            dining=build_pois("Tasca", 10, categories=("restaurants", "foods"), base_lat=38.75),
            lodging=build_pois("Hotel", 3, categories=("accomodations",), base_lat=38.78),
        )
        self.settings = DaySettings(party_size=2, daily_budget=100, lodging_interval=3)

    def test_windows_in_order(self) -> None:
        day = assemble_day(1, DayPools(activities=self.pools.activities, dining=self.pools.dining),
                           self.settings, BuildState(), city="Lisbon")
        assert [w.period for w in day.time_slots] == [
            TimePeriod.MORNING, TimePeriod.AFTERNOON, TimePeriod.EVENING,
        ]
        assert [len(w.activities) for w in day.time_slots] == [2, 2, 1]
        assert day.city == "Lisbon"
        assert day.title == "Arrival & First Impressions"
        assert day.time_slots[0].start_time == "09:00"
        assert day.time_slots[2].end_time == "22:00"

    def test_cost_within_ceiling(self) -> None:
        pools = DayPools(activities=self.pools.activities, dining=self.pools.dining)
        day = assemble_day(1, pools, self.settings, BuildState())
        assert day.budget_ceiling == 200
        assert day.estimated_cost == 180
        assert day.estimated_cost <= day.budget_ceiling

    def test_evening_is_dining(self) -> None:
        day = assemble_day(2, self.pools, self.settings, BuildState())
        evening = day.time_slots[2]
        assert all(v.name.startswith("Tasca") for v in evening.activities)

    def test_night_window_on_lodging_day(self) -> None:
        settings = DaySettings(party_size=1, daily_budget=200, lodging_interval=3)
        day = assemble_day(1, self.pools, settings, BuildState())
        assert day.time_slots[-1].period == TimePeriod.NIGHT
        assert len(day.time_slots[-1].activities) == 1
        assert day.time_slots[-1].start_time == "22:00"

    def test_no_night_window_between_lodging_days(self) -> None:
        settings = DaySettings(party_size=1, daily_budget=200, lodging_interval=3)
        day = assemble_day(2, self.pools, settings, BuildState())
        assert TimePeriod.NIGHT not in [w.period for w in day.time_slots]

    def test_no_night_window_without_lodging(self) -> None:
        pools = DayPools(activities=self.pools.activities, dining=self.pools.dining)
        day = assemble_day(1, pools, self.settings, BuildState())
        assert len(day.time_slots) == 3

    def test_same_seed_same_day(self) -> None:
        first = assemble_day(3, self.pools, self.settings, BuildState())
        second = assemble_day(3, self.pools, self.settings, BuildState())
        assert [v.place_key for v in first.visits] == [v.place_key for v in second.visits]

    def test_days_draw_different_places(self) -> None:
        state = BuildState()
        day_one = assemble_day(1, self.pools, self.settings, state)
        day_two = assemble_day(2, self.pools, self.settings, state)
        assert not {v.place_key for v in day_one.visits} & {v.place_key for v in day_two.visits}

    def test_budget_resets_each_day(self) -> None:
        state = BuildState()
        for day_number in (1, 2, 3):
            day = assemble_day(day_number, self.pools, self.settings, state)
            assert day.estimated_cost <= 200
            assert len(day.time_slots[0].activities) == 2

    def test_empty_pools_give_empty_windows(self) -> None:
        day = assemble_day(1, DayPools(), self.settings, BuildState())
        assert len(day.time_slots) == 3
        assert all(not w.activities for w in day.time_slots)
        assert day.estimated_cost == 0

    def test_zero_budget_only_free_places(self) -> None:
        parks = build_pois("Park", 5, categories=("gardens_and_parks",), base_lat=38.60)
        pools = DayPools(activities=[*parks, *self.pools.activities], dining=self.pools.dining)
        settings = DaySettings(party_size=2, daily_budget=0)
        day = assemble_day(1, pools, settings, BuildState())
        assert all(v.estimated_cost == "Free" for v in day.visits)
        assert len(day.time_slots[0].activities) == 2
        assert not day.time_slots[2].activities
