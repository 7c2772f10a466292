from __future__ import annotations

from typing import ClassVar

from catalog_core.adapters.memory.repository import InMemorySearchableRepository

from ..domain import Category, CategoryId
from ..repository import CategoryFilter


class CategoryInMemoryRepository(
    InMemorySearchableRepository[Category, CategoryId, CategoryFilter]
):
    entity_type = Category
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def _apply_filter(
        self, items: list[Category], filter: CategoryFilter | None  # noqa: A002
    ) -> list[Category]:
        if not filter:
            return items
        return [item for item in items if self._contains(item.name, filter)]
