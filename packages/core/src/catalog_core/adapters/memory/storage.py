from __future__ import annotations

from ...ports.storage import StoredObject
from ...primitives.exceptions import NotFoundError


class InMemoryStorage:
    """In-memory implementation of ``IStorage``."""

    def __init__(self) -> None:
        self._objects: dict[str, StoredObject] = {}

    async def store(
        self, *, id: str, data: bytes, mime_type: str | None = None  # noqa: A002
    ) -> None:
        self._objects[id] = StoredObject(id=id, data=data, mime_type=mime_type)

    async def get(self, id: str) -> StoredObject:  # noqa: A002
        try:
            return self._objects[id]
        except KeyError:
            raise NotFoundError(id, "File") from None

    def __contains__(self, id: object) -> bool:  # noqa: A002
        return id in self._objects
