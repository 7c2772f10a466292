from __future__ import annotations

from typing import Protocol, runtime_checkable

from catalog_core.ports.repository import ISearchableRepository
from catalog_core.ports.search import SearchParams

from .domain import Category, CategoryId

#: Name substring, matched case-insensitively.
CategoryFilter = str


class CategorySearchParams(SearchParams[CategoryFilter]):
    pass


@runtime_checkable
class ICategoryRepository(ISearchableRepository[Category, CategoryId], Protocol):
    pass
