from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain import Category


@dataclass(frozen=True)
class CategoryOutput:
    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: Category) -> CategoryOutput:
        return cls(
            id=str(entity.id),
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )
