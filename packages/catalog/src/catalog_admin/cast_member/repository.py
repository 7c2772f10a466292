from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from catalog_core.ports.repository import ISearchableRepository
from catalog_core.ports.search import SearchParams

from .domain import CastMember, CastMemberId, CastMemberType


class CastMemberFilter(BaseModel):
    """Name substring and/or exact type; both must match when both are set."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: CastMemberType | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _blank_name_is_none(cls, value: Any) -> Any:
        return value or None


class CastMemberSearchParams(SearchParams[CastMemberFilter]):
    @field_validator("filter", mode="after")
    @classmethod
    def _drop_empty_filter(cls, value: CastMemberFilter | None) -> CastMemberFilter | None:
        if value is None or (value.name is None and value.type is None):
            return None
        return value


@runtime_checkable
class ICastMemberRepository(ISearchableRepository[CastMember, CastMemberId], Protocol):
    pass
