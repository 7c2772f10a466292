from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from catalog_core.adapters.memory.repository import InMemorySearchableRepository

from ..domain import Video, VideoId
from ..repository import VideoFilter

if TYPE_CHECKING:
    from catalog_core.domain.identifiers import Uuid


def _any_of(wanted: list[Uuid] | None, present: dict[str, Uuid]) -> bool:
    if not wanted:
        return True
    return any(i.id in present for i in wanted)


class VideoInMemoryRepository(InMemorySearchableRepository[Video, VideoId, VideoFilter]):
    entity_type = Video
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"title", "created_at"})

    def _apply_filter(
        self, items: list[Video], filter: VideoFilter | None  # noqa: A002
    ) -> list[Video]:
        if filter is None:
            return items
        return [
            item
            for item in items
            if (filter.title is None or self._contains(item.title, filter.title))
            and _any_of(filter.categories_id, item.categories_id)
            and _any_of(filter.genres_id, item.genres_id)
            and _any_of(filter.cast_members_id, item.cast_members_id)
        ]
