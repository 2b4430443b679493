"""Category Relevance Filter — travel style profiles and candidate filtering."""

from .service import (
    DEFAULT_PROFILE,
    STYLE_PROFILES,
    StyleProfile,
    expand_categories,
    filter_by_relevance,
    get_style_profile,
    matches_categories,
)

__all__ = [
    "DEFAULT_PROFILE",
    "STYLE_PROFILES",
    "StyleProfile",
    "expand_categories",
    "filter_by_relevance",
    "get_style_profile",
    "matches_categories",
]
