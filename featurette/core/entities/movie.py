"""
Movie entity.

A movie keeps its special features (bonus videos found in "extras" or
"specials" sub-folders) as an ordered list of ids.
"""

from dataclasses import dataclass, field
from typing import Optional

from featurette.core.entities.base_item import BaseItem, ItemType, MetadataProvider
from featurette.core.value_objects import MovieInfo, UserConfiguration

# Priority order of the external ids used as user data key
USER_DATA_KEY_PROVIDERS: tuple[MetadataProvider, ...] = (
    MetadataProvider.TMDB,
    MetadataProvider.IMDB,
)

_LIST_FIELDS: tuple[str, ...] = (
    "special_feature_ids",
    "soundtrack_ids",
    "theme_song_ids",
    "theme_video_ids",
    "local_trailer_ids",
    "remote_trailers",
    "tags",
    "taglines",
    "keywords",
)


@dataclass
class Movie(BaseItem):
    """
    Movie item.

    special_feature_ids is only written by the special feature reconciler,
    in one assignment, after every special feature has been refreshed.

    Attributes:
        special_feature_ids: Ids of the special features, sorted by path, no duplicates
        soundtrack_ids: Ids of soundtrack albums
        theme_song_ids: Ids of theme songs
        theme_video_ids: Ids of theme videos
        local_trailer_ids: Ids of trailers found on disk
        remote_trailers: Urls of online trailers
        tags: Free tags
        taglines: Taglines
        keywords: Plot keywords
        budget: Production budget
        revenue: Box office revenue
        critic_rating: Critic rating (0-100)
        critic_rating_summary: Critic consensus
        tmdb_collection_name: Name of the TMDB collection
        award_summary: Awards summary
        metascore: Metacritic score
        preferred_metadata_language: Language requested from providers
        preferred_metadata_country_code: Country requested from providers
    """

    item_type: ItemType = ItemType.MOVIE
    special_feature_ids: list[str] = field(default_factory=list)
    soundtrack_ids: list[str] = field(default_factory=list)
    theme_song_ids: list[str] = field(default_factory=list)
    theme_video_ids: list[str] = field(default_factory=list)
    local_trailer_ids: list[str] = field(default_factory=list)
    remote_trailers: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    taglines: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    budget: Optional[float] = None
    revenue: Optional[float] = None
    critic_rating: Optional[float] = None
    critic_rating_summary: Optional[str] = None
    tmdb_collection_name: Optional[str] = None
    award_summary: Optional[str] = None
    metascore: Optional[float] = None
    preferred_metadata_language: Optional[str] = None
    preferred_metadata_country_code: Optional[str] = None

    def __post_init__(self) -> None:
        # Les collections ne sont jamais None
        for name in _LIST_FIELDS:
            if getattr(self, name) is None:
                setattr(self, name, [])
        # Un bonus n'apparait qu'une fois, premier rang conserve
        self.special_feature_ids = list(dict.fromkeys(self.special_feature_ids))

    def get_user_data_key(self) -> str:
        """TMDB id, then IMDb id, else the generic item key."""
        for provider in USER_DATA_KEY_PROVIDERS:
            value = self.get_provider_id(provider)
            if value:
                return value
        return super().get_user_data_key()

    def get_block_unrated_value(self, config: UserConfiguration) -> bool:
        return config.block_unrated_movies

    def get_lookup_info(self) -> MovieInfo:
        """Builds the lookup key handed to metadata providers."""
        return MovieInfo(
            name=self.name,
            path=self.path,
            year=self.production_year,
            provider_ids=dict(self.provider_ids),
            metadata_language=self.preferred_metadata_language,
            metadata_country_code=self.preferred_metadata_country_code,
        )
