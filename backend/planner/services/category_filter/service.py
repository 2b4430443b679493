"""Travel style profiles and category relevance filtering.

Each travel style maps to the category tags it cares about (OpenTripMap
``kinds`` vocabulary) plus default pacing and activity level. Candidates are
kept when one of their tags contains one of the style's categories.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from planner.models import ActivityLevel, Pacing, PointOfInterest, TravelStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleProfile:
    """Defaults for one travel style."""
    categories: tuple[str, ...]
    pacing: Pacing
    activity_level: ActivityLevel


STYLE_PROFILES: dict[TravelStyle, StyleProfile] = {
    TravelStyle.LEISURE: StyleProfile(
        ("interesting_places", "gardens_and_parks", "view_points", "foods"),
        Pacing.MODERATE, ActivityLevel.MEDIUM,
    ),
    TravelStyle.BUSINESS: StyleProfile(
        ("restaurants", "cafes", "shops", "accomodations"),
        Pacing.RELAXED, ActivityLevel.LOW,
    ),
    TravelStyle.ADVENTURE: StyleProfile(
        ("natural", "geological_formations", "mountain_peaks", "beaches", "sport", "diving"),
        Pacing.FAST, ActivityLevel.HIGH,
    ),
    TravelStyle.CULTURAL: StyleProfile(
        ("cultural", "museums", "historic", "monuments_and_memorials", "theatres_and_entertainments"),
        Pacing.MODERATE, ActivityLevel.MEDIUM,
    ),
    TravelStyle.FAMILY: StyleProfile(
        ("amusements", "zoos", "aquariums", "beaches", "gardens_and_parks"),
        Pacing.RELAXED, ActivityLevel.MEDIUM,
    ),
    TravelStyle.SOLO: StyleProfile(
        ("museums", "art_galleries", "cafes", "view_points", "shops"),
        Pacing.MODERATE, ActivityLevel.HIGH,
    ),
    TravelStyle.FOODIE: StyleProfile(
        ("foods", "restaurants", "marketplaces", "cafes"),
        Pacing.MODERATE, ActivityLevel.MEDIUM,
    ),
    TravelStyle.RELAXATION: StyleProfile(
        ("beaches", "gardens_and_parks", "natural", "cafes"),
        Pacing.RELAXED, ActivityLevel.LOW,
    ),
    TravelStyle.ROMANTIC: StyleProfile(
        ("view_points", "restaurants", "gardens_and_parks", "beaches"),
        Pacing.RELAXED, ActivityLevel.MEDIUM,
    ),
}

DEFAULT_PROFILE = STYLE_PROFILES[TravelStyle.LEISURE]


def get_style_profile(style: str) -> StyleProfile | None:
    """Profile for a style tag, or None when the style is unknown."""
    try:
        return STYLE_PROFILES[TravelStyle(style.strip().lower())]
    except ValueError:
        return None


def expand_categories(style: str, preferences: Iterable[str] = ()) -> list[str]:
    """Base preferences followed by the style's categories, lowercased, no duplicates.

    Unknown styles add nothing beyond the base preferences.
    """
    profile = get_style_profile(style)
    style_categories = profile.categories if profile else ()
    if profile is None:
        logger.debug(f"[FILTER] Unknown travel style '{style}', using preferences only")

    expanded: list[str] = []
    for category in [*preferences, *style_categories]:
        normalized = category.strip().lower()
        if normalized and normalized not in expanded:
            expanded.append(normalized)
    return expanded


def matches_categories(poi: PointOfInterest, categories: Sequence[str]) -> bool:
    tags = [tag.lower() for tag in poi.categories]
    return any(category in tag for category in categories for tag in tags)


def filter_by_relevance(
    candidates: Sequence[PointOfInterest],
    categories: Sequence[str],
) -> list[PointOfInterest]:
    """Keep candidates tagged with one of ``categories``.

    Never narrows a non-empty list to nothing: when no candidate matches, or
    there is nothing to match against, the full list is returned.
    """
    if not categories:
        return list(candidates)

    relevant = [poi for poi in candidates if matches_categories(poi, categories)]
    if not relevant and candidates:
        logger.info(
            f"[FILTER] No candidate matches {list(categories)}, keeping all {len(candidates)}"
        )
        return list(candidates)
    return relevant
