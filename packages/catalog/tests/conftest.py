"""Fixtures and test-data builders for the catalog tests.

Each builder states the default of every field it sets; override a field
with a keyword argument and call ``build()`` (or ``build_many()``).
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from catalog_admin import Container, RepositoryBackend, Settings, build_container
from catalog_admin.cast_member.domain import CastMember, CastMemberId, CastMemberType
from catalog_admin.category.domain import Category, CategoryId
from catalog_admin.genre.domain import Genre, GenreId
from catalog_admin.shared.media import AudioVideoMedia, UploadedFile
from catalog_admin.video.domain import Rating, Video, VideoId

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


# --- Builders ---


@dataclass
class CategoryBuilder:
    name: str = "Movie"
    description: str | None = "some description"
    is_active: bool = True
    id: CategoryId | None = None  # random when None
    created_at: datetime | None = None  # now when None

    def build(self) -> Category:
        return Category(
            id=self.id or CategoryId(),
            name=self.name,
            description=self.description,
            is_active=self.is_active,
            created_at=self.created_at or _now(),
        )

    def build_many(self, count: int, start: datetime = BASE_TIME) -> list[Category]:
        """*count* categories named ``"<name> <i>"``, one second apart."""
        return [
            replace(
                self, name=f"{self.name} {i}", created_at=start + timedelta(seconds=i)
            ).build()
            for i in range(count)
        ]


@dataclass
class CastMemberBuilder:
    name: str = "Jane Doe"
    type: CastMemberType = CastMemberType.ACTOR
    id: CastMemberId | None = None
    created_at: datetime | None = None

    def build(self) -> CastMember:
        return CastMember(
            id=self.id or CastMemberId(),
            name=self.name,
            type=self.type,
            created_at=self.created_at or _now(),
        )


@dataclass
class GenreBuilder:
    name: str = "Drama"
    categories_id: Iterable[CategoryId] = field(default_factory=list)
    is_active: bool = True
    id: GenreId | None = None
    created_at: datetime | None = None

    def build(self) -> Genre:
        return Genre(
            id=self.id or GenreId(),
            name=self.name,
            categories_id={c.id: c for c in self.categories_id},
            is_active=self.is_active,
            created_at=self.created_at or _now(),
        )


@dataclass
class VideoBuilder:
    title: str = "Movie title"
    description: str = "some description"
    released_year: int = 2024
    duration: int = 90
    rating: Rating = Rating.RL
    is_opened: bool = True
    categories_id: Iterable[CategoryId] = field(default_factory=list)
    genres_id: Iterable[GenreId] = field(default_factory=list)
    cast_members_id: Iterable[CastMemberId] = field(default_factory=list)
    trailer: AudioVideoMedia | None = None
    video: AudioVideoMedia | None = None
    id: VideoId | None = None
    created_at: datetime | None = None

    def build(self) -> Video:
        return Video(
            id=self.id or VideoId(),
            title=self.title,
            description=self.description,
            released_year=self.released_year,
            duration=self.duration,
            rating=self.rating,
            is_opened=self.is_opened,
            categories_id={c.id: c for c in self.categories_id},
            genres_id={g.id: g for g in self.genres_id},
            cast_members_id={c.id: c for c in self.cast_members_id},
            trailer=self.trailer,
            video=self.video,
            created_at=self.created_at or _now(),
        )


@dataclass
class UploadedFileBuilder:
    raw_name: str = "video.mp4"
    data: bytes = b"\x00\x00\x00\x18ftypmp42"
    mime_type: str = "video/mp4"
    size: int | None = None  # len(data) when None

    def build(self) -> UploadedFile:
        return UploadedFile(
            raw_name=self.raw_name,
            data=self.data,
            mime_type=self.mime_type,
            size=len(self.data) if self.size is None else self.size,
        )


@pytest.fixture
def category_builder() -> type[CategoryBuilder]:
    return CategoryBuilder


@pytest.fixture
def cast_member_builder() -> type[CastMemberBuilder]:
    return CastMemberBuilder


@pytest.fixture
def genre_builder() -> type[GenreBuilder]:
    return GenreBuilder


@pytest.fixture
def video_builder() -> type[VideoBuilder]:
    return VideoBuilder


@pytest.fixture
def file_builder() -> type[UploadedFileBuilder]:
    return UploadedFileBuilder


# --- Containers ---


@pytest.fixture
def memory_container() -> Container:
    return build_container(Settings(repository_backend=RepositoryBackend.MEMORY))


@pytest.fixture(params=[RepositoryBackend.MEMORY, RepositoryBackend.SQLALCHEMY])
async def container(
    request: pytest.FixtureRequest, tmp_path: Path
) -> AsyncGenerator[Container, None]:
    """The same container on both repository backends.

    The SQLAlchemy backend uses a SQLite file so concurrent units of work
    get separate connections.
    """
    settings = Settings(
        repository_backend=request.param,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
    )
    built = build_container(settings)
    await built.create_schema()
    yield built
    await built.dispose()
