"""InMemoryMessageBroker — records integration events for tests."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...domain.events import IntegrationEvent

logger = logging.getLogger(__name__)


class InMemoryMessageBroker:
    """In-memory implementation of ``IMessageBroker``.

    Keeps every published event in ``published`` and forwards it to the
    handlers subscribed to its ``event_name``.
    """

    def __init__(self) -> None:
        self.published: list[IntegrationEvent] = []
        self._subscribers: dict[str, list[Callable[[IntegrationEvent], Any]]] = {}

    def subscribe(
        self, event_name: str, handler: Callable[[IntegrationEvent], Any]
    ) -> None:
        self._subscribers.setdefault(event_name, []).append(handler)

    async def publish_event(self, event: IntegrationEvent) -> None:
        self.published.append(event)
        logger.debug("Recorded integration event %s", event.event_name)
        for handler in self._subscribers.get(event.event_name, []):
            result = handler(event)
            if isawaitable(result):
                await result

    # ── Test helpers ─────────────────────────────────────────────

    def events_named(self, event_name: str) -> list[IntegrationEvent]:
        return [e for e in self.published if e.event_name == event_name]

    def clear(self) -> None:
        self.published.clear()
