from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from catalog_core.ports.repository import ISearchableRepository
from catalog_core.ports.search import SearchParams

from ..category.domain import CategoryId
from .domain import Genre, GenreId


class GenreFilter(BaseModel):
    """Name substring and/or any-of category ids; ANDed when both are set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str | None = None
    categories_id: list[CategoryId] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _blank_name_is_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("categories_id", mode="before")
    @classmethod
    def _coerce_categories_id(cls, value: Any) -> Any:
        if not value:
            return None
        return [v if isinstance(v, CategoryId) else CategoryId(v) for v in value]


class GenreSearchParams(SearchParams[GenreFilter]):
    @field_validator("filter", mode="after")
    @classmethod
    def _drop_empty_filter(cls, value: GenreFilter | None) -> GenreFilter | None:
        if value is None or (value.name is None and value.categories_id is None):
            return None
        return value


@runtime_checkable
class IGenreRepository(ISearchableRepository[Genre, GenreId], Protocol):
    pass
