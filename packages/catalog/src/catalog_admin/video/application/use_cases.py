"""Video use cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

from catalog_core.application.pagination import PaginationOutput
from catalog_core.application.use_case import UseCase
from catalog_core.domain.notification import Notification
from catalog_core.primitives.exceptions import (
    EntityValidationError,
    InvalidArgumentError,
    NotFoundError,
)

from ...shared.media import AudioVideoMediaStatus, InvalidMediaFileError, UploadedFile
from ..domain import Rating, Video, VideoId
from ..media import (
    AudioVideoMediaKind,
    ImageMediaKind,
    audio_video_media_from_file,
    image_media_from_file,
)
from ..repository import VideoSearchParams
from .outputs import CreateVideoOutput, UpdateVideoOutput, VideoOutput

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalog_core.ports.storage import IStorage
    from catalog_core.ports.unit_of_work import UnitOfWork

    from ...cast_member.application.validators import (
        CastMembersIdExistsInDatabaseValidator,
    )
    from ...cast_member.repository import ICastMemberRepository
    from ...category.application.validators import CategoriesIdExistsInDatabaseValidator
    from ...category.repository import ICategoryRepository
    from ...genre.application.validators import GenresIdExistsInDatabaseValidator
    from ...genre.repository import IGenreRepository
    from ..repository import IVideoRepository

logger = logging.getLogger(__name__)


class CreateVideoInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    released_year: int
    duration: int
    rating: str
    is_opened: bool
    categories_id: list[str]
    genres_id: list[str]
    cast_members_id: list[str]


class UpdateVideoInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str | None = None
    description: str | None = None
    released_year: int | None = None
    duration: int | None = None
    rating: str | None = None
    is_opened: bool | None = None
    categories_id: list[str] | None = None
    genres_id: list[str] | None = None
    cast_members_id: list[str] | None = None


class GetVideoInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class DeleteVideoInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class ListVideosInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Any = None
    per_page: Any = None
    sort: str | None = None
    sort_dir: str | None = None
    filter: dict[str, Any] | None = None


class UploadImageMediaInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    kind: ImageMediaKind
    file: UploadedFile


class UploadAudioVideoMediaInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    kind: AudioVideoMediaKind
    file: UploadedFile


class ProcessAudioVideoMediaInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    encoded_location: str
    kind: AudioVideoMediaKind
    status: AudioVideoMediaStatus

    @field_validator("status")
    @classmethod
    def _final_status(cls, value: AudioVideoMediaStatus) -> AudioVideoMediaStatus:
        if value not in (AudioVideoMediaStatus.COMPLETED, AudioVideoMediaStatus.FAILED):
            raise ValueError("status must be completed or failed")
        return value


# ── Create / Update ──────────────────────────────────────────────


class _VideoWriteUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        video_repository: IVideoRepository,
        categories_id_validator: CategoriesIdExistsInDatabaseValidator,
        genres_id_validator: GenresIdExistsInDatabaseValidator,
        cast_members_id_validator: CastMembersIdExistsInDatabaseValidator,
    ) -> None:
        self._uow = uow
        self._video_repository = video_repository
        self._categories_id_validator = categories_id_validator
        self._genres_id_validator = genres_id_validator
        self._cast_members_id_validator = cast_members_id_validator

    async def _validate_ids(
        self, validator: Any, ids: list[str] | None, field: str, errors: Notification
    ) -> Sequence[Any]:
        """Existing ids of *ids*, or ``[]`` with the missing ones put on *errors*."""
        if not ids:
            return []
        valid, not_found = await validator.validate(ids, uow=self._uow)
        if not_found:
            errors.set_error([str(e) for e in not_found], field)
        return valid


class CreateVideoUseCase(_VideoWriteUseCase, UseCase[CreateVideoInput, CreateVideoOutput]):
    async def execute(self, input: CreateVideoInput) -> CreateVideoOutput:  # noqa: A002
        errors = Notification()

        rating = Rating.RL
        try:
            rating = Rating.parse(input.rating)
        except InvalidArgumentError as e:
            errors.add_error(str(e), "rating")

        categories_id = await self._validate_ids(
            self._categories_id_validator, input.categories_id, "categories_id", errors
        )
        genres_id = await self._validate_ids(
            self._genres_id_validator, input.genres_id, "genres_id", errors
        )
        cast_members_id = await self._validate_ids(
            self._cast_members_id_validator,
            input.cast_members_id,
            "cast_members_id",
            errors,
        )

        video = Video.create(
            title=input.title,
            description=input.description,
            released_year=input.released_year,
            duration=input.duration,
            rating=rating,
            is_opened=input.is_opened,
            categories_id=categories_id,
            genres_id=genres_id,
            cast_members_id=cast_members_id,
        )
        video.notification.copy_errors(errors)
        if video.notification.has_errors():
            raise EntityValidationError(video.notification.to_json())

        await self._uow.do(lambda uow: self._video_repository.insert(video, uow=uow))
        return CreateVideoOutput(id=str(video.id))


class UpdateVideoUseCase(_VideoWriteUseCase, UseCase[UpdateVideoInput, UpdateVideoOutput]):
    """Applies every field that is set; empty id lists leave the references as they are."""

    async def execute(self, input: UpdateVideoInput) -> UpdateVideoOutput:  # noqa: A002
        video = await self._video_repository.find_by_id(VideoId(input.id), uow=self._uow)
        if video is None:
            raise NotFoundError(input.id, Video)

        if input.title is not None:
            video.change_title(input.title)
        if input.description is not None:
            video.change_description(input.description)
        if input.released_year is not None:
            video.change_released_year(input.released_year)
        if input.duration is not None:
            video.change_duration(input.duration)
        if input.rating is not None:
            try:
                video.change_rating(Rating.parse(input.rating))
            except InvalidArgumentError as e:
                video.notification.add_error(str(e), "rating")
        if input.is_opened is True:
            video.mark_as_opened()
        elif input.is_opened is False:
            video.mark_as_closed()

        notification = video.notification
        categories_id = await self._validate_ids(
            self._categories_id_validator, input.categories_id, "categories_id", notification
        )
        if categories_id:
            video.sync_categories_id(categories_id)
        genres_id = await self._validate_ids(
            self._genres_id_validator, input.genres_id, "genres_id", notification
        )
        if genres_id:
            video.sync_genres_id(genres_id)
        cast_members_id = await self._validate_ids(
            self._cast_members_id_validator,
            input.cast_members_id,
            "cast_members_id",
            notification,
        )
        if cast_members_id:
            video.sync_cast_members_id(cast_members_id)

        if notification.has_errors():
            raise EntityValidationError(notification.to_json())

        await self._uow.do(lambda uow: self._video_repository.update(video, uow=uow))
        return UpdateVideoOutput(id=str(video.id))


# ── Read ─────────────────────────────────────────────────────────


class _VideoReadUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        video_repository: IVideoRepository,
        category_repository: ICategoryRepository,
        genre_repository: IGenreRepository,
        cast_member_repository: ICastMemberRepository,
    ) -> None:
        self._uow = uow
        self._video_repository = video_repository
        self._category_repository = category_repository
        self._genre_repository = genre_repository
        self._cast_member_repository = cast_member_repository

    async def _to_outputs(self, videos: list[Video]) -> list[VideoOutput]:
        genres_id = {g.id: g for v in videos for g in v.genres_id.values()}
        cast_members_id = {c.id: c for v in videos for c in v.cast_members_id.values()}
        genres = (
            await self._genre_repository.find_by_ids(list(genres_id.values()), uow=self._uow)
            if genres_id
            else []
        )
        categories_id = {c.id: c for v in videos for c in v.categories_id.values()}
        categories_id.update({c.id: c for g in genres for c in g.categories_id.values()})
        categories = (
            await self._category_repository.find_by_ids(
                list(categories_id.values()), uow=self._uow
            )
            if categories_id
            else []
        )
        cast_members = (
            await self._cast_member_repository.find_by_ids(
                list(cast_members_id.values()), uow=self._uow
            )
            if cast_members_id
            else []
        )
        return [
            VideoOutput.from_entity(
                video, categories=categories, genres=genres, cast_members=cast_members
            )
            for video in videos
        ]


class GetVideoUseCase(_VideoReadUseCase, UseCase[GetVideoInput, VideoOutput]):
    async def execute(self, input: GetVideoInput) -> VideoOutput:  # noqa: A002
        video = await self._video_repository.find_by_id(VideoId(input.id), uow=self._uow)
        if video is None:
            raise NotFoundError(input.id, Video)
        (output,) = await self._to_outputs([video])
        return output


class ListVideosUseCase(
    _VideoReadUseCase, UseCase[ListVideosInput, PaginationOutput[VideoOutput]]
):
    async def execute(self, input: ListVideosInput) -> PaginationOutput[VideoOutput]:  # noqa: A002
        params = VideoSearchParams.model_validate(input.model_dump())
        result = await self._video_repository.search(params, uow=self._uow)
        return PaginationOutput.from_search_result(
            await self._to_outputs(result.items), result
        )


# ── Delete ───────────────────────────────────────────────────────


class DeleteVideoUseCase(UseCase[DeleteVideoInput, None]):
    def __init__(self, uow: UnitOfWork, video_repository: IVideoRepository) -> None:
        self._uow = uow
        self._video_repository = video_repository

    async def execute(self, input: DeleteVideoInput) -> None:  # noqa: A002
        video_id = VideoId(input.id)
        video = await self._video_repository.find_by_id(video_id, uow=self._uow)
        if video is None:
            raise NotFoundError(input.id, Video)
        video.mark_as_deleted()

        async def work(uow: UnitOfWork) -> None:
            await self._video_repository.delete(video_id, uow=uow)
            uow.add_aggregate_root(video)

        await self._uow.do(work)


# ── Medias ───────────────────────────────────────────────────────


class _VideoMediaUseCase:
    def __init__(
        self, uow: UnitOfWork, video_repository: IVideoRepository, storage: IStorage
    ) -> None:
        self._uow = uow
        self._video_repository = video_repository
        self._storage = storage

    async def _get_video(self, video_id: str) -> Video:
        video = await self._video_repository.find_by_id(VideoId(video_id), uow=self._uow)
        if video is None:
            raise NotFoundError(video_id, Video)
        return video


class UploadImageMediaUseCase(_VideoMediaUseCase, UseCase[UploadImageMediaInput, None]):
    async def execute(self, input: UploadImageMediaInput) -> None:  # noqa: A002
        video = await self._get_video(input.video_id)
        try:
            image = image_media_from_file(input.kind, input.file, video.id)
        except InvalidMediaFileError as e:
            raise EntityValidationError([{input.kind.value: [str(e)]}]) from e

        video.replace_image_media(input.kind, image)
        await self._storage.store(
            id=image.url, data=input.file.data, mime_type=input.file.mime_type
        )
        await self._uow.do(lambda uow: self._video_repository.update(video, uow=uow))


class UploadAudioVideoMediaUseCase(
    _VideoMediaUseCase, UseCase[UploadAudioVideoMediaInput, None]
):
    async def execute(self, input: UploadAudioVideoMediaInput) -> None:  # noqa: A002
        video = await self._get_video(input.video_id)
        try:
            media = audio_video_media_from_file(input.kind, input.file, video.id)
        except InvalidMediaFileError as e:
            raise EntityValidationError([{input.kind.value: [str(e)]}]) from e

        video.replace_audio_video_media(input.kind, media)
        await self._storage.store(
            id=media.raw_url, data=input.file.data, mime_type=input.file.mime_type
        )
        await self._uow.do(lambda uow: self._video_repository.update(video, uow=uow))


class ProcessAudioVideoMediaUseCase(UseCase[ProcessAudioVideoMediaInput, None]):
    def __init__(self, uow: UnitOfWork, video_repository: IVideoRepository) -> None:
        self._uow = uow
        self._video_repository = video_repository

    async def execute(self, input: ProcessAudioVideoMediaInput) -> None:  # noqa: A002
        video = await self._video_repository.find_by_id(
            VideoId(input.video_id), uow=self._uow
        )
        if video is None:
            raise NotFoundError(input.video_id, Video)

        if input.status is AudioVideoMediaStatus.COMPLETED:
            video.complete_audio_video_media(input.kind, input.encoded_location)
        else:
            video.fail_audio_video_media(input.kind)
        logger.info(
            "Video %s %s media is now %s", video.id, input.kind.value, input.status.value
        )

        await self._uow.do(lambda uow: self._video_repository.update(video, uow=uow))
