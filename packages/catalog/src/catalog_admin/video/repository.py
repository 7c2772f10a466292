from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from catalog_core.ports.repository import ISearchableRepository
from catalog_core.ports.search import SearchParams

from ..cast_member.domain import CastMemberId
from ..category.domain import CategoryId
from ..genre.domain import GenreId
from .domain import Video, VideoId


def _as_ids(value: Any, id_type: type[Any]) -> Any:
    if not value:
        return None
    return [v if isinstance(v, id_type) else id_type(v) for v in value]


class VideoFilter(BaseModel):
    """Title substring plus any-of reference ids; every set key must match."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str | None = None
    categories_id: list[CategoryId] | None = None
    genres_id: list[GenreId] | None = None
    cast_members_id: list[CastMemberId] | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _blank_title_is_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("categories_id", mode="before")
    @classmethod
    def _coerce_categories_id(cls, value: Any) -> Any:
        return _as_ids(value, CategoryId)

    @field_validator("genres_id", mode="before")
    @classmethod
    def _coerce_genres_id(cls, value: Any) -> Any:
        return _as_ids(value, GenreId)

    @field_validator("cast_members_id", mode="before")
    @classmethod
    def _coerce_cast_members_id(cls, value: Any) -> Any:
        return _as_ids(value, CastMemberId)

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (self.title, self.categories_id, self.genres_id, self.cast_members_id)
        )


class VideoSearchParams(SearchParams[VideoFilter]):
    @field_validator("filter", mode="after")
    @classmethod
    def _drop_empty_filter(cls, value: VideoFilter | None) -> VideoFilter | None:
        if value is None or value.is_empty():
            return None
        return value


@runtime_checkable
class IVideoRepository(ISearchableRepository[Video, VideoId], Protocol):
    pass
