"""Domain primitives: aggregates, events, value objects, notification."""

from __future__ import annotations

from .aggregate import AggregateRoot, event_handler
from .events import DomainEvent, IntegrationEvent
from .identifiers import Uuid
from .notification import Notification
from .value_object import ValueObject

__all__: list[str] = [
    "AggregateRoot",
    "DomainEvent",
    "IntegrationEvent",
    "Notification",
    "Uuid",
    "ValueObject",
    "event_handler",
]
