from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, select
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_persistence_sqlalchemy.core.models import AggregateModelMixin, Base
from catalog_persistence_sqlalchemy.core.repository import SQLAlchemySearchableRepository

from ...cast_member.domain import CastMemberId
from ...category.domain import CategoryId
from ...genre.domain import GenreId
from ...shared.media import AudioVideoMedia, AudioVideoMediaStatus, ImageMedia
from ..domain import Rating, Video, VideoId
from ..media import AudioVideoMediaKind, ImageMediaKind
from ..repository import VideoFilter

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


def _video_fk() -> Any:
    return mapped_column(
        String(36), ForeignKey("videos.id", ondelete="CASCADE"), primary_key=True
    )


class VideoCategoryModel(Base):
    __tablename__ = "category_video"

    video_id: Mapped[str] = _video_fk()
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    )


class VideoGenreModel(Base):
    __tablename__ = "genre_video"

    video_id: Mapped[str] = _video_fk()
    genre_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
    )


class VideoCastMemberModel(Base):
    __tablename__ = "cast_member_video"

    video_id: Mapped[str] = _video_fk()
    cast_member_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("cast_members.id", ondelete="CASCADE"), primary_key=True
    )


class ImageMediaModel(Base):
    """One row per (video, image kind)."""

    __tablename__ = "image_medias"

    video_id: Mapped[str] = _video_fk()
    video_related_field: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)


class AudioVideoMediaModel(Base):
    """One row per (video, audio/video kind)."""

    __tablename__ = "audio_video_medias"

    video_id: Mapped[str] = _video_fk()
    video_related_field: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    raw_location: Mapped[str] = mapped_column(String(255), nullable=False)
    encoded_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class VideoModel(AggregateModelMixin, Base):
    __tablename__ = "videos"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    released_year: Mapped[int] = mapped_column(Integer, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[str] = mapped_column(String(3), nullable=False)
    is_opened: Mapped[bool] = mapped_column(Boolean, nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False)
    image_medias: Mapped[list[ImageMediaModel]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    audio_video_medias: Mapped[list[AudioVideoMediaModel]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    categories: Mapped[list[VideoCategoryModel]] = relationship(
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=VideoCategoryModel.category_id,
    )
    genres: Mapped[list[VideoGenreModel]] = relationship(
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=VideoGenreModel.genre_id,
    )
    cast_members: Mapped[list[VideoCastMemberModel]] = relationship(
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=VideoCastMemberModel.cast_member_id,
    )


class VideoSQLAlchemyRepository(
    SQLAlchemySearchableRepository[Video, VideoId, VideoFilter]
):
    """Videos with their medias and reference ids in child tables.

    Image and audio/video medias are keyed by the aggregate field they fill
    (``banner``, ``trailer``, ...), so replacing a media overwrites its row.
    """

    entity_type = Video
    model_type = VideoModel
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"title", "created_at"})

    def to_model(self, entity: Video) -> VideoModel:
        video_id = str(entity.id)
        image_medias = [
            ImageMediaModel(
                video_id=video_id,
                video_related_field=kind.value,
                name=media.name,
                location=media.location,
            )
            for kind in ImageMediaKind
            if (media := getattr(entity, kind.value)) is not None
        ]
        audio_video_medias = [
            AudioVideoMediaModel(
                video_id=video_id,
                video_related_field=kind.value,
                name=media.name,
                raw_location=media.raw_location,
                encoded_location=media.encoded_location,
                status=media.status.value,
            )
            for kind in AudioVideoMediaKind
            if (media := entity.get_audio_video_media(kind)) is not None
        ]
        return VideoModel(
            id=video_id,
            title=entity.title,
            description=entity.description,
            released_year=entity.released_year,
            duration=entity.duration,
            rating=entity.rating.value,
            is_opened=entity.is_opened,
            is_published=entity.is_published,
            created_at=entity.created_at,
            image_medias=image_medias,
            audio_video_medias=audio_video_medias,
            categories=[
                VideoCategoryModel(video_id=video_id, category_id=i)
                for i in entity.categories_id
            ],
            genres=[
                VideoGenreModel(video_id=video_id, genre_id=i) for i in entity.genres_id
            ],
            cast_members=[
                VideoCastMemberModel(video_id=video_id, cast_member_id=i)
                for i in entity.cast_members_id
            ],
        )

    def from_model(self, model: Any) -> Video:
        images = {
            row.video_related_field: ImageMedia(name=row.name, location=row.location)
            for row in model.image_medias
        }
        audio_videos = {
            row.video_related_field: AudioVideoMedia(
                name=row.name,
                raw_location=row.raw_location,
                encoded_location=row.encoded_location,
                status=AudioVideoMediaStatus(row.status),
            )
            for row in model.audio_video_medias
        }
        return Video(
            id=VideoId(model.id),
            title=model.title,
            description=model.description,
            released_year=model.released_year,
            duration=model.duration,
            rating=Rating(model.rating),
            is_opened=model.is_opened,
            is_published=model.is_published,
            banner=images.get(ImageMediaKind.BANNER.value),
            thumbnail=images.get(ImageMediaKind.THUMBNAIL.value),
            thumbnail_half=images.get(ImageMediaKind.THUMBNAIL_HALF.value),
            trailer=audio_videos.get(AudioVideoMediaKind.TRAILER.value),
            video=audio_videos.get(AudioVideoMediaKind.VIDEO.value),
            created_at=model.created_at,
            categories_id={
                link.category_id: CategoryId(link.category_id)
                for link in model.categories
            },
            genres_id={link.genre_id: GenreId(link.genre_id) for link in model.genres},
            cast_members_id={
                link.cast_member_id: CastMemberId(link.cast_member_id)
                for link in model.cast_members
            },
        )

    def _filter_clauses(
        self, filter: VideoFilter | None  # noqa: A002
    ) -> list[ColumnElement[bool]]:
        if filter is None:
            return []
        clauses: list[ColumnElement[bool]] = []
        if filter.title is not None:
            clauses.append(VideoModel.title.icontains(filter.title, autoescape=True))
        if filter.categories_id:
            clauses.append(
                VideoModel.id.in_(
                    select(VideoCategoryModel.video_id).where(
                        VideoCategoryModel.category_id.in_(
                            [str(i) for i in filter.categories_id]
                        )
                    )
                )
            )
        if filter.genres_id:
            clauses.append(
                VideoModel.id.in_(
                    select(VideoGenreModel.video_id).where(
                        VideoGenreModel.genre_id.in_([str(i) for i in filter.genres_id])
                    )
                )
            )
        if filter.cast_members_id:
            clauses.append(
                VideoModel.id.in_(
                    select(VideoCastMemberModel.video_id).where(
                        VideoCastMemberModel.cast_member_id.in_(
                            [str(i) for i in filter.cast_members_id]
                        )
                    )
                )
            )
        return clauses
