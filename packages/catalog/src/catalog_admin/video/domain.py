"""Video aggregate and its domain events."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field
from typing_extensions import assert_never

from catalog_core.domain.aggregate import AggregateRoot, event_handler
from catalog_core.domain.events import DomainEvent, IntegrationEvent
from catalog_core.domain.identifiers import Uuid
from catalog_core.primitives.exceptions import InvalidArgumentError

from ..cast_member.domain import CastMemberId
from ..category.domain import CategoryId
from ..genre.domain import GenreId
from ..shared.media import AudioVideoMedia, AudioVideoMediaStatus, ImageMedia
from ..shared.validators import utc_now, validate_required_text
from .media import AudioVideoMediaKind, ImageMediaKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class Rating(str, Enum):
    RL = "L"
    R10 = "10"
    R12 = "12"
    R14 = "14"
    R16 = "16"
    R18 = "18"

    @classmethod
    def parse(cls, value: str) -> Rating:
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(r.value for r in cls)
            raise InvalidArgumentError(
                f"The rating must be one of following values: {allowed}, "
                f"passed value: {value}"
            ) from None


class VideoId(Uuid):
    pass


# ── Events ───────────────────────────────────────────────────────


class VideoCreated(DomainEvent):
    aggregate_id: VideoId
    title: str
    is_published: bool
    categories_id: list[CategoryId]
    genres_id: list[GenreId]
    cast_members_id: list[CastMemberId]
    created_at: datetime


class AudioVideoMediaReplaced(DomainEvent):
    aggregate_id: VideoId
    media: AudioVideoMedia
    media_kind: AudioVideoMediaKind

    def get_integration_event(self) -> IntegrationEvent:
        return IntegrationEvent(
            event_name="AudioVideoMediaUploadedIntegrationEvent",
            event_version=self.event_version,
            occurred_on=self.occurred_on,
            payload={
                "resource_id": f"{self.aggregate_id}.{self.media_kind.value}",
                "file_path": self.media.raw_url,
            },
        )


class VideoDeleted(DomainEvent):
    aggregate_id: VideoId

    def get_integration_event(self) -> IntegrationEvent:
        return IntegrationEvent(
            event_name="VideoDeletedIntegrationEvent",
            event_version=self.event_version,
            occurred_on=self.occurred_on,
            payload={"video_id": str(self.aggregate_id)},
        )


# ── Aggregate ────────────────────────────────────────────────────


def _id_map(ids: Iterable[Uuid]) -> dict[str, Uuid]:
    return {i.id: i for i in ids}


class Video(AggregateRoot[VideoId]):
    """A video and its medias.

    A video is published automatically once both its trailer and its video
    media finished encoding; the check runs whenever the video is created or
    an audio/video media is replaced.
    """

    id: VideoId = Field(default_factory=VideoId)
    title: str
    description: str
    released_year: int
    duration: int
    rating: Rating
    is_opened: bool
    is_published: bool = False
    banner: ImageMedia | None = None
    thumbnail: ImageMedia | None = None
    thumbnail_half: ImageMedia | None = None
    trailer: AudioVideoMedia | None = None
    video: AudioVideoMedia | None = None
    categories_id: dict[str, CategoryId] = Field(default_factory=dict)
    genres_id: dict[str, GenreId] = Field(default_factory=dict)
    cast_members_id: dict[str, CastMemberId] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        released_year: int,
        duration: int,
        rating: Rating,
        is_opened: bool,
        categories_id: Iterable[CategoryId] = (),
        genres_id: Iterable[GenreId] = (),
        cast_members_id: Iterable[CastMemberId] = (),
        trailer: AudioVideoMedia | None = None,
        video: AudioVideoMedia | None = None,
    ) -> Video:
        entity = cls(
            title=title,
            description=description,
            released_year=released_year,
            duration=duration,
            rating=rating,
            is_opened=is_opened,
            trailer=trailer,
            video=video,
            categories_id=_id_map(categories_id),
            genres_id=_id_map(genres_id),
            cast_members_id=_id_map(cast_members_id),
        )
        entity.validate_fields(["title"])
        entity.apply_event(
            VideoCreated(
                aggregate_id=entity.id,
                title=entity.title,
                is_published=entity.is_published,
                categories_id=list(entity.categories_id.values()),
                genres_id=list(entity.genres_id.values()),
                cast_members_id=list(entity.cast_members_id.values()),
                created_at=entity.created_at,
            )
        )
        return entity

    # ── Attributes ───────────────────────────────────────────────

    def change_title(self, title: str) -> None:
        self.title = title
        self.validate_fields(["title"])

    def change_description(self, description: str) -> None:
        self.description = description

    def change_released_year(self, released_year: int) -> None:
        self.released_year = released_year

    def change_duration(self, duration: int) -> None:
        self.duration = duration

    def change_rating(self, rating: Rating) -> None:
        self.rating = rating

    def mark_as_opened(self) -> None:
        self.is_opened = True

    def mark_as_closed(self) -> None:
        self.is_opened = False

    def mark_as_deleted(self) -> None:
        self.apply_event(VideoDeleted(aggregate_id=self.id))

    # ── Medias ───────────────────────────────────────────────────

    def replace_image_media(self, kind: ImageMediaKind, media: ImageMedia) -> None:
        match kind:
            case ImageMediaKind.BANNER:
                self.banner = media
            case ImageMediaKind.THUMBNAIL:
                self.thumbnail = media
            case ImageMediaKind.THUMBNAIL_HALF:
                self.thumbnail_half = media
            case _:
                assert_never(kind)

    def replace_audio_video_media(
        self, kind: AudioVideoMediaKind, media: AudioVideoMedia
    ) -> None:
        self._set_audio_video_media(kind, media)
        self.apply_event(
            AudioVideoMediaReplaced(aggregate_id=self.id, media=media, media_kind=kind)
        )

    def get_audio_video_media(self, kind: AudioVideoMediaKind) -> AudioVideoMedia | None:
        match kind:
            case AudioVideoMediaKind.TRAILER:
                return self.trailer
            case AudioVideoMediaKind.VIDEO:
                return self.video
            case _:
                assert_never(kind)

    def complete_audio_video_media(
        self, kind: AudioVideoMediaKind, encoded_location: str
    ) -> None:
        self._set_audio_video_media(
            kind, self._require_audio_video_media(kind).complete(encoded_location)
        )
        self._try_mark_as_published()

    def fail_audio_video_media(self, kind: AudioVideoMediaKind) -> None:
        self._set_audio_video_media(kind, self._require_audio_video_media(kind).fail())

    def _require_audio_video_media(self, kind: AudioVideoMediaKind) -> AudioVideoMedia:
        media = self.get_audio_video_media(kind)
        if media is None:
            raise InvalidArgumentError(f"{kind.value.capitalize()} not found")
        return media

    def _set_audio_video_media(
        self, kind: AudioVideoMediaKind, media: AudioVideoMedia
    ) -> None:
        match kind:
            case AudioVideoMediaKind.TRAILER:
                self.trailer = media
            case AudioVideoMediaKind.VIDEO:
                self.video = media
            case _:
                assert_never(kind)

    # ── References ───────────────────────────────────────────────

    def add_category_id(self, category_id: CategoryId) -> None:
        self.categories_id[category_id.id] = category_id

    def remove_category_id(self, category_id: CategoryId) -> None:
        self.categories_id.pop(category_id.id, None)

    def sync_categories_id(self, categories_id: Sequence[CategoryId]) -> None:
        if not categories_id:
            raise InvalidArgumentError("Categories id is empty")
        self.categories_id = {c.id: c for c in categories_id}

    def add_genre_id(self, genre_id: GenreId) -> None:
        self.genres_id[genre_id.id] = genre_id

    def remove_genre_id(self, genre_id: GenreId) -> None:
        self.genres_id.pop(genre_id.id, None)

    def sync_genres_id(self, genres_id: Sequence[GenreId]) -> None:
        if not genres_id:
            raise InvalidArgumentError("Genres id is empty")
        self.genres_id = {g.id: g for g in genres_id}

    def add_cast_member_id(self, cast_member_id: CastMemberId) -> None:
        self.cast_members_id[cast_member_id.id] = cast_member_id

    def remove_cast_member_id(self, cast_member_id: CastMemberId) -> None:
        self.cast_members_id.pop(cast_member_id.id, None)

    def sync_cast_members_id(self, cast_members_id: Sequence[CastMemberId]) -> None:
        if not cast_members_id:
            raise InvalidArgumentError("Cast members id is empty")
        self.cast_members_id = {c.id: c for c in cast_members_id}

    # ── Validation ───────────────────────────────────────────────

    def validate_fields(self, fields: Sequence[str] | None = None) -> bool:
        if fields is None or "title" in fields:
            validate_required_text(self.notification, self.title, "title")
        return not self.notification.has_errors()

    # ── Local event handlers ─────────────────────────────────────

    @event_handler(VideoCreated)
    def _on_video_created(self, event: VideoCreated) -> None:
        self._try_mark_as_published()

    @event_handler(AudioVideoMediaReplaced)
    def _on_audio_video_media_replaced(self, event: AudioVideoMediaReplaced) -> None:
        self._try_mark_as_published()

    def _try_mark_as_published(self) -> None:
        if self.is_published:
            return
        if (
            self.trailer is not None
            and self.video is not None
            and self.trailer.status is AudioVideoMediaStatus.COMPLETED
            and self.video.status is AudioVideoMediaStatus.COMPLETED
        ):
            self.is_published = True
