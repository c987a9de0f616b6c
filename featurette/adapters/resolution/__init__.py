"""Resolution de chemins en entites de la videotheque."""

from featurette.adapters.resolution.video_resolver import VideoPathResolver

__all__ = ["VideoPathResolver"]
