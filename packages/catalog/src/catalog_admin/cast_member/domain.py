"""CastMember aggregate."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from pydantic import Field

from catalog_core.domain.aggregate import AggregateRoot
from catalog_core.domain.identifiers import Uuid

from ..shared.validators import utc_now, validate_required_text

if TYPE_CHECKING:
    from collections.abc import Sequence


class CastMemberType(IntEnum):
    DIRECTOR = 1
    ACTOR = 2


class CastMemberId(Uuid):
    pass


class CastMember(AggregateRoot[CastMemberId]):
    id: CastMemberId = Field(default_factory=CastMemberId)
    name: str
    type: CastMemberType
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(cls, *, name: str, type: CastMemberType) -> CastMember:  # noqa: A002
        cast_member = cls(name=name, type=type)
        cast_member.validate_fields(["name"])
        return cast_member

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate_fields(["name"])

    def change_type(self, type: CastMemberType) -> None:  # noqa: A002
        self.type = type

    def validate_fields(self, fields: Sequence[str] | None = None) -> bool:
        if fields is None or "name" in fields:
            validate_required_text(self.notification, self.name, "name")
        return not self.notification.has_errors()
