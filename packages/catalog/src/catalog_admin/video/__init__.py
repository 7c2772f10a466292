from .domain import (
    AudioVideoMediaReplaced,
    Rating,
    Video,
    VideoCreated,
    VideoDeleted,
    VideoId,
)
from .media import AudioVideoMediaKind, ImageMediaKind
from .repository import IVideoRepository, VideoFilter, VideoSearchParams

__all__ = [
    "AudioVideoMediaKind",
    "AudioVideoMediaReplaced",
    "IVideoRepository",
    "ImageMediaKind",
    "Rating",
    "Video",
    "VideoCreated",
    "VideoDeleted",
    "VideoFilter",
    "VideoId",
    "VideoSearchParams",
]
