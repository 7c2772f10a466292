"""Video media kinds and the rules each kind applies to uploaded files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from typing_extensions import assert_never

from ..shared.media import AudioVideoMedia, ImageMedia, MediaFileValidator

if TYPE_CHECKING:
    from ..shared.media import UploadedFile
    from .domain import VideoId

_MB: Final = 1024 * 1024
_IMAGE_TYPES: Final = ("image/jpeg", "image/png", "image/gif")


class ImageMediaKind(str, Enum):
    BANNER = "banner"
    THUMBNAIL = "thumbnail"
    THUMBNAIL_HALF = "thumbnail_half"


class AudioVideoMediaKind(str, Enum):
    TRAILER = "trailer"
    VIDEO = "video"


@dataclass(frozen=True)
class MediaRules:
    max_size: int
    mime_types: tuple[str, ...]
    folder: str

    def validator(self) -> MediaFileValidator:
        return MediaFileValidator(self.max_size, self.mime_types)

    def location(self, video_id: VideoId) -> str:
        return f"videos/{video_id}/{self.folder}"


def image_rules(kind: ImageMediaKind) -> MediaRules:
    match kind:
        case ImageMediaKind.BANNER:
            return MediaRules(2 * _MB, _IMAGE_TYPES, "images")
        case ImageMediaKind.THUMBNAIL:
            return MediaRules(2 * _MB, _IMAGE_TYPES, "thumbnails")
        case ImageMediaKind.THUMBNAIL_HALF:
            return MediaRules(2 * _MB, ("image/jpeg", "image/png"), "thumbnails")
        case _:
            assert_never(kind)


def audio_video_rules(kind: AudioVideoMediaKind) -> MediaRules:
    match kind:
        case AudioVideoMediaKind.TRAILER:
            return MediaRules(500 * _MB, ("video/mp4",), "videos")
        case AudioVideoMediaKind.VIDEO:
            return MediaRules(50 * 1024 * _MB, ("video/mp4",), "videos")
        case _:
            assert_never(kind)


def image_media_from_file(
    kind: ImageMediaKind, file: UploadedFile, video_id: VideoId
) -> ImageMedia:
    """Validate *file* for *kind*; raises ``InvalidMediaFileError``."""
    rules = image_rules(kind)
    name = rules.validator().validate(
        raw_name=file.raw_name, mime_type=file.mime_type, size=file.size
    )
    return ImageMedia(name=f"{video_id}-{name}", location=rules.location(video_id))


def audio_video_media_from_file(
    kind: AudioVideoMediaKind, file: UploadedFile, video_id: VideoId
) -> AudioVideoMedia:
    """Validate *file* for *kind*; raises ``InvalidMediaFileError``."""
    rules = audio_video_rules(kind)
    name = rules.validator().validate(
        raw_name=file.raw_name, mime_type=file.mime_type, size=file.size
    )
    return AudioVideoMedia(name=f"{video_id}-{name}", raw_location=rules.location(video_id))
