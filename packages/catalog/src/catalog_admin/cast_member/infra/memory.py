from __future__ import annotations

from typing import ClassVar

from catalog_core.adapters.memory.repository import InMemorySearchableRepository

from ..domain import CastMember, CastMemberId
from ..repository import CastMemberFilter


class CastMemberInMemoryRepository(
    InMemorySearchableRepository[CastMember, CastMemberId, CastMemberFilter]
):
    entity_type = CastMember
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def _apply_filter(
        self, items: list[CastMember], filter: CastMemberFilter | None  # noqa: A002
    ) -> list[CastMember]:
        if filter is None:
            return items
        return [
            item
            for item in items
            if (filter.name is None or self._contains(item.name, filter.name))
            and (filter.type is None or item.type == filter.type)
        ]
