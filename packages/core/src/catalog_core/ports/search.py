"""SearchParams / SearchResult — the searchable repository's input and output."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

T = TypeVar("T")
FilterT = TypeVar("FilterT")

DEFAULT_PAGE: Final = 1
DEFAULT_PER_PAGE: Final = 15
MAX_PER_PAGE: Final = 100


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _positive_int(value: Any, default: int) -> int:
    """Coerce *value* to a positive integer, falling back to *default*."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else default
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    if isinstance(value, int) and value > 0:
        return value
    return default


class SearchParams(BaseModel, Generic[FilterT]):
    """Filter / sort / paginate request for a searchable repository.

    Loose input is normalised instead of rejected, so query-string values
    can be passed through untouched:

    - ``page`` and ``per_page`` fall back to ``1`` / ``15`` when they are not
      positive integers; ``per_page`` is capped at ``MAX_PER_PAGE``.
    - ``sort_dir`` is ``None`` while ``sort`` is ``None``; otherwise it is
      ``asc`` unless ``desc`` was given (case-insensitive).
    - an empty ``filter`` becomes ``None``.

    Entity-specific subclasses parametrize ``FilterT`` and may add their own
    ``filter`` normalisation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    sort: str | None = None
    sort_dir: SortDirection | None = None
    filter: FilterT | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalise_sort_dir(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        sort = data.get("sort")
        if sort is None or sort == "":
            data["sort_dir"] = None
            return data
        raw = data.get("sort_dir")
        raw = raw.value if isinstance(raw, SortDirection) else str(raw or "")
        data["sort_dir"] = (
            SortDirection.DESC if raw.lower() == "desc" else SortDirection.ASC
        )
        return data

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value: Any) -> int:
        return _positive_int(value, DEFAULT_PAGE)

    @field_validator("per_page", mode="before")
    @classmethod
    def _coerce_per_page(cls, value: Any) -> int:
        return min(_positive_int(value, DEFAULT_PER_PAGE), MAX_PER_PAGE)

    @field_validator("sort", mode="before")
    @classmethod
    def _coerce_sort(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("filter", mode="before")
    @classmethod
    def _coerce_empty_filter(cls, value: Any) -> Any:
        if value is None or value == "" or value == {}:
            return None
        return value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """One page of a search.

    ``total`` counts every item matching the filter before pagination;
    ``last_page`` is derived from it and never stored.
    """

    items: list[T]
    total: int
    current_page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return math.ceil(self.total / self.per_page)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": list(self.items),
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
