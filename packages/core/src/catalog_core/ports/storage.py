from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class StoredObject:
    id: str
    data: bytes
    mime_type: str | None = None


@runtime_checkable
class IStorage(Protocol):
    """Port for binary blob storage used by media upload use cases."""

    async def store(
        self, *, id: str, data: bytes, mime_type: str | None = None  # noqa: A002
    ) -> None: ...

    async def get(self, id: str) -> StoredObject:  # noqa: A002
        """Return the stored object; raise ``NotFoundError`` if unknown."""
        ...
