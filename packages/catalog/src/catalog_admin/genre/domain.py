"""Genre aggregate and its domain events."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from catalog_core.domain.aggregate import AggregateRoot
from catalog_core.domain.events import DomainEvent, IntegrationEvent
from catalog_core.domain.identifiers import Uuid
from catalog_core.primitives.exceptions import InvalidArgumentError

from ..category.domain import CategoryId
from ..shared.validators import utc_now, validate_required_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class GenreId(Uuid):
    pass


# ── Events ───────────────────────────────────────────────────────


class GenreCreated(DomainEvent):
    aggregate_id: GenreId
    name: str
    categories_id: list[CategoryId]
    is_active: bool
    created_at: datetime

    def get_integration_event(self) -> IntegrationEvent:
        return IntegrationEvent(
            event_name="GenreCreatedIntegrationEvent",
            event_version=self.event_version,
            occurred_on=self.occurred_on,
            payload={
                "genre_id": str(self.aggregate_id),
                "name": self.name,
                "categories_id": [str(c) for c in self.categories_id],
                "is_active": self.is_active,
                "created_at": self.created_at.isoformat(),
            },
        )


class GenreUpdated(DomainEvent):
    aggregate_id: GenreId
    name: str
    categories_id: list[CategoryId]
    is_active: bool

    def get_integration_event(self) -> IntegrationEvent:
        return IntegrationEvent(
            event_name="GenreUpdatedIntegrationEvent",
            event_version=self.event_version,
            occurred_on=self.occurred_on,
            payload={
                "genre_id": str(self.aggregate_id),
                "name": self.name,
                "categories_id": [str(c) for c in self.categories_id],
                "is_active": self.is_active,
            },
        )


class GenreDeleted(DomainEvent):
    aggregate_id: GenreId

    def get_integration_event(self) -> IntegrationEvent:
        return IntegrationEvent(
            event_name="GenreDeletedIntegrationEvent",
            event_version=self.event_version,
            occurred_on=self.occurred_on,
            payload={"genre_id": str(self.aggregate_id)},
        )


# ── Aggregate ────────────────────────────────────────────────────


class Genre(AggregateRoot[GenreId]):
    """A genre groups categories.

    ``categories_id`` is keyed by the category id string and keeps
    insertion order. Every state change other than adding or removing a
    single category applies a ``GenreUpdated`` event.
    """

    id: GenreId = Field(default_factory=GenreId)
    name: str
    categories_id: dict[str, CategoryId] = Field(default_factory=dict)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        categories_id: Iterable[CategoryId] = (),
        is_active: bool = True,
    ) -> Genre:
        genre = cls(
            name=name,
            categories_id={c.id: c for c in categories_id},
            is_active=is_active,
        )
        genre.validate_fields(["name"])
        genre.apply_event(
            GenreCreated(
                aggregate_id=genre.id,
                name=genre.name,
                categories_id=list(genre.categories_id.values()),
                is_active=genre.is_active,
                created_at=genre.created_at,
            )
        )
        return genre

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate_fields(["name"])
        self._apply_updated()

    def add_category_id(self, category_id: CategoryId) -> None:
        self.categories_id[category_id.id] = category_id

    def remove_category_id(self, category_id: CategoryId) -> None:
        self.categories_id.pop(category_id.id, None)

    def sync_categories_id(self, categories_id: Sequence[CategoryId]) -> None:
        if not categories_id:
            raise InvalidArgumentError("Categories ID cannot be empty")
        self.categories_id = {c.id: c for c in categories_id}
        self._apply_updated()

    def activate(self) -> None:
        self.is_active = True
        self._apply_updated()

    def deactivate(self) -> None:
        self.is_active = False
        self._apply_updated()

    def mark_as_deleted(self) -> None:
        self.apply_event(GenreDeleted(aggregate_id=self.id))

    def validate_fields(self, fields: Sequence[str] | None = None) -> bool:
        if fields is None or "name" in fields:
            validate_required_text(self.notification, self.name, "name")
        return not self.notification.has_errors()

    def _apply_updated(self) -> None:
        self.apply_event(
            GenreUpdated(
                aggregate_id=self.id,
                name=self.name,
                categories_id=list(self.categories_id.values()),
                is_active=self.is_active,
            )
        )
