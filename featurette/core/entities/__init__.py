"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- BaseItem: Common library item (identity, location, parent linkage)
- Video: Resolvable video item (special features, trailers)
- Movie: Movie with its special feature ids
- LocationType, ItemType, MetadataProvider: Enumerations used by items
- MetadataRefreshOptions: Context shared across a metadata refresh run
"""

from featurette.core.entities.base_item import (
    BaseItem,
    ItemType,
    LocationType,
    MetadataProvider,
    Video,
)
from featurette.core.entities.movie import Movie
from featurette.core.entities.refresh_options import MetadataRefreshOptions

__all__ = [
    "BaseItem",
    "ItemType",
    "LocationType",
    "MetadataProvider",
    "Video",
    "Movie",
    "MetadataRefreshOptions",
]
