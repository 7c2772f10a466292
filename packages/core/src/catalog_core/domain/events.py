"""Domain Event and Integration Event base classes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IntegrationEvent(BaseModel):
    """Externally-published, versioned projection of a domain event.

    Decouples the internal event shape from the wire contract: only
    ``payload`` crosses the broker boundary, keyed by ``event_name``.
    """

    model_config = ConfigDict(frozen=True)

    event_name: str
    event_version: int = 1
    occurred_on: datetime
    payload: dict[str, Any] = Field(default_factory=dict)


class DomainEvent(BaseModel):
    """Base class for all Domain Events.

    Events are immutable. ``aggregate_id`` is the identity value object of
    the aggregate that applied the event.

    Subclasses that are relevant outside the process override
    :meth:`get_integration_event`; the default returns ``None`` and the
    mediator skips the event when publishing to the broker.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    aggregate_id: Any
    occurred_on: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_version: int = 1

    def get_integration_event(self) -> IntegrationEvent | None:
        return None

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)
