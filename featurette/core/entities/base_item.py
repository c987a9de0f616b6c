"""
Library item entities.

Base entity shared by every item of the library, and the Video item
produced by path resolution.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from featurette.core.value_objects import UserConfiguration


class LocationType(Enum):
    """Where the item lives."""

    FILE_SYSTEM = "file_system"
    VIRTUAL = "virtual"


class ItemType(Enum):
    """Kind of library item."""

    VIDEO = "video"
    MOVIE = "movie"
    FOLDER = "folder"


class MetadataProvider(str, Enum):
    """External metadata providers whose ids can be stored on an item."""

    TMDB = "tmdb"
    IMDB = "imdb"
    TVDB = "tvdb"


@dataclass
class BaseItem:
    """
    Common library item.

    The parent linkage is a foreign key: an item never holds its parent
    object, the repository resolves it when needed.

    Attributes:
        id: Identity key, derived from the path by the resolver. Must not change.
        name: Display name
        path: File path (or folder path when is_folder is True)
        item_type: Kind of item
        location_type: FILE_SYSTEM when backed by a file, VIRTUAL otherwise
        parent_id: Id of the containing folder item, None outside the parent/child tree
        is_folder: True if the item is a folder
        is_in_mixed_folder: True if the containing folder holds several unrelated titles
        production_year: Release year
        official_rating: Parental rating (e.g. "PG-13")
        provider_ids: External ids keyed by provider name
        date_last_refreshed: Last successful metadata refresh
    """

    id: str
    name: str = ""
    path: Optional[Path] = None
    item_type: ItemType = ItemType.VIDEO
    location_type: LocationType = LocationType.FILE_SYSTEM
    parent_id: Optional[str] = None
    is_folder: bool = False
    is_in_mixed_folder: bool = False
    production_year: Optional[int] = None
    official_rating: Optional[str] = None
    provider_ids: dict[str, str] = field(default_factory=dict)
    date_last_refreshed: Optional[datetime] = None

    @property
    def containing_folder_path(self) -> Optional[Path]:
        """Folder whose entries describe this item (itself for a folder)."""
        if self.path is None:
            return None
        return self.path if self.is_folder else self.path.parent

    def get_provider_id(self, provider: MetadataProvider) -> Optional[str]:
        """Returns the external id for a provider, None if missing or empty."""
        return self.provider_ids.get(provider.value) or None

    def set_provider_id(self, provider: MetadataProvider, value: Optional[str]) -> None:
        """Sets (or removes, if value is empty) the external id for a provider."""
        if value:
            self.provider_ids[provider.value] = value
        else:
            self.provider_ids.pop(provider.value, None)

    def get_user_data_key(self) -> str:
        """Key used to join user data (watched state, ratings) to this item."""
        return self.id

    def get_block_unrated_value(self, config: UserConfiguration) -> bool:
        """Whether unrated items of this kind are blocked for the user."""
        return config.block_not_rated


@dataclass
class Video(BaseItem):
    """
    Video item, as produced by the path resolver.

    Special features are plain videos owned by the repository; the movie
    only keeps their ids.
    """

    run_time_seconds: Optional[int] = None
