"""Shared fixtures for unit tests."""

import pytest

from planner.models import CityPools, Coordinates, PointOfInterest


def build_poi(
    name: str,
    categories: tuple[str, ...] = ("monuments_and_memorials",),
    lat: float = 38.7000,
    lng: float = -9.1400,
    poi_id: str | None = None,
) -> PointOfInterest:
    return PointOfInterest(
        id=poi_id or f"id_{name.lower().replace(' ', '_')}",
        name=name,
        coordinates=Coordinates(lat=lat, lng=lng),
        categories=categories,
    )


def build_pois(
    prefix: str,
    count: int,
    categories: tuple[str, ...] = ("monuments_and_memorials",),
    base_lat: float = 38.7000,
    base_lng: float = -9.1400,
) -> list[PointOfInterest]:
    return [
        build_poi(
            f"{prefix} {i}",
            categories=categories,
            lat=base_lat + i * 0.001,
            lng=base_lng + i * 0.001,
        )
        for i in range(count)
    ]


@pytest.fixture
def make_poi():
    return build_poi


@pytest.fixture
def make_pois():
    return build_pois


@pytest.fixture
def lisbon_pools() -> CityPools:
    """30 monuments ($10-20) and 10 restaurants ($20-40)."""
    return CityPools(
        attractions=build_pois("Lisbon Sight", 30),
        dining=build_pois("Lisbon Tasca", 10, categories=("restaurants", "foods"), base_lat=38.75),
    )
