from __future__ import annotations

from typing import ClassVar

from catalog_core.adapters.memory.repository import InMemorySearchableRepository

from ..domain import Genre, GenreId
from ..repository import GenreFilter


class GenreInMemoryRepository(InMemorySearchableRepository[Genre, GenreId, GenreFilter]):
    entity_type = Genre
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def _apply_filter(
        self, items: list[Genre], filter: GenreFilter | None  # noqa: A002
    ) -> list[Genre]:
        if filter is None:
            return items
        wanted = {c.id for c in filter.categories_id or ()}
        return [
            item
            for item in items
            if (filter.name is None or self._contains(item.name, filter.name))
            and (not wanted or not wanted.isdisjoint(item.categories_id))
        ]
