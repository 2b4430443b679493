"""Places providers — candidate pools per city."""

from .service import (
    OpenTripMapPlacesProvider,
    OTMPlace,
    PlacesProvider,
    PlacesProviderError,
    StaticPlacesProvider,
    fetch_city_pools,
)

__all__ = [
    "OpenTripMapPlacesProvider",
    "OTMPlace",
    "PlacesProvider",
    "PlacesProviderError",
    "StaticPlacesProvider",
    "fetch_city_pools",
]
