from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog_admin import Container
from catalog_admin.cast_member.domain import CastMemberType
from catalog_admin.category.domain import CategoryId
from catalog_admin.genre.domain import GenreId
from catalog_admin.shared.media import (
    AudioVideoMedia,
    AudioVideoMediaStatus,
    InvalidMediaFileMimeTypeError,
    InvalidMediaFileSizeError,
)
from catalog_admin.video.application import (
    CreateVideoInput,
    CreateVideoUseCase,
    DeleteVideoInput,
    DeleteVideoUseCase,
    GetVideoInput,
    GetVideoUseCase,
    ListVideosInput,
    ListVideosUseCase,
    ProcessAudioVideoMediaInput,
    ProcessAudioVideoMediaUseCase,
    UploadAudioVideoMediaInput,
    UploadAudioVideoMediaUseCase,
    UpdateVideoInput,
    UpdateVideoUseCase,
    UploadImageMediaInput,
    UploadImageMediaUseCase,
)
from catalog_admin.video.domain import (
    AudioVideoMediaReplaced,
    Rating,
    Video,
    VideoCreated,
    VideoDeleted,
)
from catalog_admin.video.media import (
    AudioVideoMediaKind,
    ImageMediaKind,
    audio_video_media_from_file,
    image_media_from_file,
)
from catalog_core import (
    EntityValidationError,
    InMemoryMessageBroker,
    InMemoryStorage,
    InvalidArgumentError,
    NotFoundError,
)

# --- Helpers ---


def _media(status: AudioVideoMediaStatus = AudioVideoMediaStatus.PENDING) -> AudioVideoMedia:
    return AudioVideoMedia(name="file.mp4", raw_location="videos/raw", status=status)


def _create_input(**overrides: object) -> CreateVideoInput:
    data: dict[str, object] = {
        "title": "Movie title",
        "description": "some description",
        "released_year": 2024,
        "duration": 90,
        "rating": "L",
        "is_opened": True,
        "categories_id": [],
        "genres_id": [],
        "cast_members_id": [],
    }
    data.update(overrides)
    return CreateVideoInput.model_validate(data)


def _create_video(**overrides: object) -> Video:
    data: dict[str, object] = {
        "title": "Movie title",
        "description": "some description",
        "released_year": 2024,
        "duration": 90,
        "rating": Rating.R12,
        "is_opened": False,
    }
    data.update(overrides)
    return Video.create(**data)  # type: ignore[arg-type]


# --- Domain ---


def test_parse_rating() -> None:
    assert Rating.parse("L") is Rating.RL
    assert Rating.parse("18") is Rating.R18

    with pytest.raises(InvalidArgumentError) as exc_info:
        Rating.parse("9")
    assert str(exc_info.value) == (
        "The rating must be one of following values: L, 10, 12, 14, 16, 18, "
        "passed value: 9"
    )


def test_create_video_is_unpublished_without_completed_medias() -> None:
    video = _create_video(trailer=_media(AudioVideoMediaStatus.COMPLETED), video=_media())

    assert video.is_published is False
    [event] = video.events
    assert isinstance(event, VideoCreated)
    assert event.get_integration_event() is None


def test_create_video_with_completed_medias_is_published() -> None:
    completed = _media(AudioVideoMediaStatus.COMPLETED)
    video = _create_video(trailer=completed, video=completed)

    assert video.is_published is True


def test_blank_title_is_reported() -> None:
    video = _create_video(title="")
    assert video.notification.to_json() == [{"title": ["title should not be empty"]}]


def test_completing_both_medias_publishes_the_video() -> None:
    video = _create_video()
    video.replace_audio_video_media(AudioVideoMediaKind.TRAILER, _media())
    video.replace_audio_video_media(AudioVideoMediaKind.VIDEO, _media())

    video.complete_audio_video_media(AudioVideoMediaKind.TRAILER, "encoded/trailer")
    assert video.is_published is False

    video.complete_audio_video_media(AudioVideoMediaKind.VIDEO, "encoded/video")
    assert video.is_published is True
    assert video.video is not None
    assert video.video.encoded_location == "encoded/video"
    assert video.video.status is AudioVideoMediaStatus.COMPLETED


def test_replacing_with_completed_media_publishes_through_local_handler() -> None:
    video = _create_video(video=_media(AudioVideoMediaStatus.COMPLETED))

    video.replace_audio_video_media(
        AudioVideoMediaKind.TRAILER, _media(AudioVideoMediaStatus.COMPLETED)
    )

    assert video.is_published is True
    assert [type(e) for e in video.events] == [VideoCreated, AudioVideoMediaReplaced]


def test_failing_media_keeps_video_unpublished() -> None:
    video = _create_video(trailer=_media(AudioVideoMediaStatus.COMPLETED), video=_media())

    video.fail_audio_video_media(AudioVideoMediaKind.VIDEO)

    assert video.video is not None
    assert video.video.status is AudioVideoMediaStatus.FAILED
    assert video.is_published is False


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        (AudioVideoMediaKind.TRAILER, "Trailer not found"),
        (AudioVideoMediaKind.VIDEO, "Video not found"),
    ],
)
def test_completing_missing_media_is_rejected(kind: AudioVideoMediaKind, message: str) -> None:
    video = _create_video()
    with pytest.raises(InvalidArgumentError, match=message):
        video.complete_audio_video_media(kind, "encoded")


def test_media_replaced_integration_event() -> None:
    video = _create_video()
    media = _media()
    video.replace_audio_video_media(AudioVideoMediaKind.TRAILER, media)

    integration_event = video.events[-1].get_integration_event()

    assert integration_event is not None
    assert integration_event.event_name == "AudioVideoMediaUploadedIntegrationEvent"
    assert integration_event.payload == {
        "resource_id": f"{video.id}.trailer",
        "file_path": "videos/raw/file.mp4",
    }


def test_deleted_integration_event() -> None:
    video = _create_video()
    video.mark_as_deleted()

    event = video.events[-1]
    assert isinstance(event, VideoDeleted)
    assert event.get_integration_event().payload == {"video_id": str(video.id)}


def test_references_are_deduplicated_and_sync_rejects_empty() -> None:
    category_id = CategoryId()
    video = _create_video(categories_id=[category_id, category_id])

    assert list(video.categories_id.values()) == [category_id]
    video.add_genre_id(GenreId())
    assert len(video.genres_id) == 1

    with pytest.raises(InvalidArgumentError, match="Categories id is empty"):
        video.sync_categories_id([])
    with pytest.raises(InvalidArgumentError, match="Genres id is empty"):
        video.sync_genres_id([])


# --- Media rules ---


def test_image_media_name_and_location(file_builder: type) -> None:
    video = _create_video()
    file = file_builder(raw_name="cover.png", mime_type="image/png", data=b"png").build()

    image = image_media_from_file(ImageMediaKind.THUMBNAIL, file, video.id)

    assert image.location == f"videos/{video.id}/thumbnails"
    assert image.name.startswith(f"{video.id}-")
    assert image.name.endswith(".png")
    assert image.url == f"{image.location}/{image.name}"


def test_image_media_generates_a_new_name_per_upload(file_builder: type) -> None:
    video = _create_video()
    file = file_builder(raw_name="cover.png", mime_type="image/png", data=b"png").build()

    first = image_media_from_file(ImageMediaKind.BANNER, file, video.id)
    second = image_media_from_file(ImageMediaKind.BANNER, file, video.id)

    assert first.location == f"videos/{video.id}/images"
    assert first.name != second.name


def test_oversized_banner_is_rejected(file_builder: type) -> None:
    file = file_builder(
        raw_name="cover.png", mime_type="image/png", size=3 * 1024 * 1024
    ).build()

    with pytest.raises(InvalidMediaFileSizeError, match="3145728 > 2097152"):
        image_media_from_file(ImageMediaKind.BANNER, file, _create_video().id)


def test_thumbnail_half_rejects_gif(file_builder: type) -> None:
    file = file_builder(raw_name="cover.gif", mime_type="image/gif").build()

    with pytest.raises(InvalidMediaFileMimeTypeError, match="image/gif not in"):
        image_media_from_file(ImageMediaKind.THUMBNAIL_HALF, file, _create_video().id)


def test_trailer_accepts_mp4_only(file_builder: type) -> None:
    video = _create_video()

    media = audio_video_media_from_file(
        AudioVideoMediaKind.TRAILER, file_builder().build(), video.id
    )
    assert media.raw_location == f"videos/{video.id}/videos"
    assert media.status is AudioVideoMediaStatus.PENDING

    with pytest.raises(InvalidMediaFileMimeTypeError):
        audio_video_media_from_file(
            AudioVideoMediaKind.TRAILER,
            file_builder(raw_name="a.avi", mime_type="video/x-msvideo").build(),
            video.id,
        )


def test_process_input_accepts_final_statuses_only() -> None:
    with pytest.raises(ValidationError, match="status must be completed or failed"):
        ProcessAudioVideoMediaInput(
            video_id=str(_create_video().id),
            encoded_location="encoded",
            kind=AudioVideoMediaKind.VIDEO,
            status=AudioVideoMediaStatus.PROCESSING,
        )


# --- Use cases ---


@pytest.mark.asyncio
async def test_create_and_get_video_with_relations(
    container: Container,
    category_builder: type,
    genre_builder: type,
    cast_member_builder: type,
) -> None:
    movie = category_builder(name="Movie").build()
    series = category_builder(name="Series").build()
    await container.category_repository.bulk_insert([movie, series])
    drama = genre_builder(name="Drama", categories_id=[series.id]).build()
    await container.genre_repository.insert(drama)
    director = cast_member_builder(name="John", type=CastMemberType.DIRECTOR).build()
    await container.cast_member_repository.insert(director)

    created = await container.execute(
        CreateVideoUseCase,
        _create_input(
            rating="14",
            categories_id=[str(movie.id)],
            genres_id=[str(drama.id)],
            cast_members_id=[str(director.id)],
        ),
    )
    output = await container.execute(GetVideoUseCase, GetVideoInput(id=created.id))

    assert output.id == created.id
    assert output.rating is Rating.R14
    assert output.is_published is False
    assert [c.name for c in output.categories] == ["Movie"]
    [genre] = output.genres
    assert genre.name == "Drama"
    assert [c.name for c in genre.categories] == ["Series"]
    assert [(c.name, c.type) for c in output.cast_members] == [
        ("John", CastMemberType.DIRECTOR)
    ]


@pytest.mark.asyncio
async def test_create_video_collects_every_error(container: Container) -> None:
    missing_genre = GenreId()

    with pytest.raises(EntityValidationError) as exc_info:
        await container.execute(
            CreateVideoUseCase,
            _create_input(title="", rating="9", genres_id=[str(missing_genre)]),
        )

    assert exc_info.value.errors == [
        {"title": ["title should not be empty"]},
        {
            "rating": [
                "The rating must be one of following values: L, 10, 12, 14, 16, 18, "
                "passed value: 9"
            ]
        },
        {"genres_id": [f"Genre Not Found using ID {missing_genre}"]},
    ]
    assert await container.video_repository.find_all() == []


@pytest.mark.asyncio
async def test_update_video_changes_set_fields_only(
    container: Container, category_builder: type, video_builder: type
) -> None:
    old_category = category_builder(name="Old").build()
    new_category = category_builder(name="New").build()
    await container.category_repository.bulk_insert([old_category, new_category])
    video = video_builder(
        title="Before", rating=Rating.R10, categories_id=[old_category.id]
    ).build()
    await container.video_repository.insert(video)

    output = await container.execute(
        UpdateVideoUseCase,
        UpdateVideoInput(
            id=str(video.id),
            title="After",
            rating="16",
            is_opened=False,
            categories_id=[str(new_category.id)],
            genres_id=[],
        ),
    )

    assert output.id == str(video.id)
    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert (stored.title, stored.rating, stored.is_opened) == ("After", Rating.R16, False)
    assert stored.description == video.description
    assert list(stored.categories_id.values()) == [new_category.id]


@pytest.mark.asyncio
async def test_update_video_reports_rating_and_missing_references(
    container: Container, video_builder: type
) -> None:
    video = video_builder(title="Before").build()
    await container.video_repository.insert(video)
    missing = GenreId()

    with pytest.raises(EntityValidationError) as exc_info:
        await container.execute(
            UpdateVideoUseCase,
            UpdateVideoInput(
                id=str(video.id), title="After", rating="X", genres_id=[str(missing)]
            ),
        )

    assert [next(iter(e)) for e in exc_info.value.errors if isinstance(e, dict)] == [
        "rating",
        "genres_id",
    ]
    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert stored.title == "Before"


@pytest.mark.asyncio
async def test_get_unknown_video(container: Container) -> None:
    unknown = str(_create_video().id)
    with pytest.raises(NotFoundError, match=f"Video Not Found using ID {unknown}"):
        await container.execute(GetVideoUseCase, GetVideoInput(id=unknown))


@pytest.mark.asyncio
async def test_list_videos_by_title_and_genre(
    container: Container, genre_builder: type, video_builder: type
) -> None:
    drama = genre_builder(name="Drama").build()
    await container.genre_repository.insert(drama)
    await container.video_repository.bulk_insert(
        [
            video_builder(title="The Drama", genres_id=[drama.id]).build(),
            video_builder(title="The Comedy").build(),
            video_builder(title="Another Drama").build(),
        ]
    )

    by_title = await container.execute(
        ListVideosUseCase, ListVideosInput(filter={"title": "drama"}, sort="title")
    )
    by_genre = await container.execute(
        ListVideosUseCase, ListVideosInput(filter={"genres_id": [str(drama.id)]})
    )

    assert [v.title for v in by_title.items] == ["Another Drama", "The Drama"]
    assert [v.title for v in by_genre.items] == ["The Drama"]
    assert [g.name for g in by_genre.items[0].genres] == ["Drama"]


@pytest.mark.asyncio
async def test_delete_video_publishes_integration_event(
    container: Container, video_builder: type
) -> None:
    broker = container.message_broker
    assert isinstance(broker, InMemoryMessageBroker)
    video = video_builder().build()
    await container.video_repository.insert(video)

    await container.execute(DeleteVideoUseCase, DeleteVideoInput(id=str(video.id)))

    assert await container.video_repository.find_by_id(video.id) is None
    [event] = broker.events_named("VideoDeletedIntegrationEvent")
    assert event.payload == {"video_id": str(video.id)}


@pytest.mark.asyncio
async def test_upload_image_stores_file_and_updates_video(
    container: Container, video_builder: type, file_builder: type
) -> None:
    video = video_builder().build()
    await container.video_repository.insert(video)
    file = file_builder(raw_name="banner.jpg", mime_type="image/jpeg", data=b"jpg").build()

    await container.execute(
        UploadImageMediaUseCase,
        UploadImageMediaInput(video_id=str(video.id), kind=ImageMediaKind.BANNER, file=file),
    )

    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert stored.banner is not None
    assert isinstance(container.storage, InMemoryStorage)
    assert (await container.storage.get(stored.banner.url)).data == b"jpg"


@pytest.mark.asyncio
async def test_upload_invalid_image_is_reported_under_its_kind(
    container: Container, video_builder: type, file_builder: type
) -> None:
    video = video_builder().build()
    await container.video_repository.insert(video)
    file = file_builder(raw_name="half.gif", mime_type="image/gif").build()

    with pytest.raises(EntityValidationError) as exc_info:
        await container.execute(
            UploadImageMediaUseCase,
            UploadImageMediaInput(
                video_id=str(video.id), kind=ImageMediaKind.THUMBNAIL_HALF, file=file
            ),
        )

    [error] = exc_info.value.errors
    assert isinstance(error, dict)
    assert list(error) == ["thumbnail_half"]
    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert stored.thumbnail_half is None


@pytest.mark.asyncio
async def test_upload_trailer_publishes_media_uploaded(
    container: Container, video_builder: type, file_builder: type
) -> None:
    broker = container.message_broker
    assert isinstance(broker, InMemoryMessageBroker)
    video = video_builder().build()
    await container.video_repository.insert(video)

    await container.execute(
        UploadAudioVideoMediaUseCase,
        UploadAudioVideoMediaInput(
            video_id=str(video.id),
            kind=AudioVideoMediaKind.TRAILER,
            file=file_builder().build(),
        ),
    )

    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert stored.trailer is not None
    assert stored.trailer.raw_url in container.storage
    [event] = broker.published
    assert event.event_name == "AudioVideoMediaUploadedIntegrationEvent"
    assert event.payload == {
        "resource_id": f"{video.id}.trailer",
        "file_path": stored.trailer.raw_url,
    }


@pytest.mark.asyncio
async def test_processing_both_medias_publishes_the_video(
    container: Container, video_builder: type
) -> None:
    video = video_builder(trailer=_media(), video=_media()).build()
    await container.video_repository.insert(video)

    for kind in AudioVideoMediaKind:
        await container.execute(
            ProcessAudioVideoMediaUseCase,
            ProcessAudioVideoMediaInput(
                video_id=str(video.id),
                encoded_location=f"encoded/{kind.value}",
                kind=kind,
                status=AudioVideoMediaStatus.COMPLETED,
            ),
        )

    output = await container.execute(GetVideoUseCase, GetVideoInput(id=str(video.id)))
    assert output.is_published is True


@pytest.mark.asyncio
async def test_failed_processing_is_stored(container: Container, video_builder: type) -> None:
    video = video_builder(video=_media()).build()
    await container.video_repository.insert(video)

    await container.execute(
        ProcessAudioVideoMediaUseCase,
        ProcessAudioVideoMediaInput(
            video_id=str(video.id),
            encoded_location="",
            kind=AudioVideoMediaKind.VIDEO,
            status=AudioVideoMediaStatus.FAILED,
        ),
    )

    stored = await container.video_repository.find_by_id(video.id)
    assert stored is not None
    assert stored.video is not None
    assert stored.video.status is AudioVideoMediaStatus.FAILED


@pytest.mark.asyncio
async def test_processing_missing_media_is_rejected(
    container: Container, video_builder: type
) -> None:
    video = video_builder().build()
    await container.video_repository.insert(video)

    with pytest.raises(InvalidArgumentError, match="Trailer not found"):
        await container.execute(
            ProcessAudioVideoMediaUseCase,
            ProcessAudioVideoMediaInput(
                video_id=str(video.id),
                encoded_location="encoded",
                kind=AudioVideoMediaKind.TRAILER,
                status=AudioVideoMediaStatus.COMPLETED,
            ),
        )
