from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...category.domain import Category
    from ..domain import Genre


@dataclass(frozen=True)
class GenreCategoryOutput:
    id: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class GenreOutput:
    id: str
    name: str
    categories_id: list[str]
    is_active: bool
    created_at: datetime
    categories: list[GenreCategoryOutput] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: Genre, categories: Iterable[Category] = ()) -> GenreOutput:
        """Build the output; *categories* may contain unrelated categories."""
        related = [c for c in categories if c.id.id in entity.categories_id]
        return cls(
            id=str(entity.id),
            name=entity.name,
            categories_id=list(entity.categories_id),
            is_active=entity.is_active,
            created_at=entity.created_at,
            categories=[
                GenreCategoryOutput(id=str(c.id), name=c.name, created_at=c.created_at)
                for c in related
            ],
        )
