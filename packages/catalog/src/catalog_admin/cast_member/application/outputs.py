from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..domain import CastMemberType

if TYPE_CHECKING:
    from ..domain import CastMember


@dataclass(frozen=True)
class CastMemberOutput:
    id: str
    name: str
    type: CastMemberType
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: CastMember) -> CastMemberOutput:
        return cls(
            id=str(entity.id),
            name=entity.name,
            type=entity.type,
            created_at=entity.created_at,
        )
