"""Category aggregate."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from catalog_core.domain.aggregate import AggregateRoot
from catalog_core.domain.identifiers import Uuid

from ..shared.validators import utc_now, validate_required_text

if TYPE_CHECKING:
    from collections.abc import Sequence


class CategoryId(Uuid):
    pass


class Category(AggregateRoot[CategoryId]):
    id: CategoryId = Field(default_factory=CategoryId)
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls, *, name: str, description: str | None = None, is_active: bool = True
    ) -> Category:
        category = cls(name=name, description=description, is_active=is_active)
        category.validate_fields(["name"])
        return category

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate_fields(["name"])

    def change_description(self, description: str | None) -> None:
        self.description = description

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def validate_fields(self, fields: Sequence[str] | None = None) -> bool:
        if fields is None or "name" in fields:
            validate_required_text(self.notification, self.name, "name")
        return not self.notification.has_errors()
