"""Pagination output shared by every list use case."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from ..ports.search import SearchResult

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationOutput(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    current_page: int = 1
    last_page: int = 0
    per_page: int = 15

    @classmethod
    def from_search_result(
        cls, items: list[T], result: SearchResult[Any]
    ) -> PaginationOutput[T]:
        return cls(
            items=items,
            total=result.total,
            current_page=result.current_page,
            last_page=result.last_page,
            per_page=result.per_page,
        )
