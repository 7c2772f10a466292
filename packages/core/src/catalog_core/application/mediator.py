"""DomainEventMediator — local handler dispatch plus integration publishing."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import EventDispatchError

if TYPE_CHECKING:
    from ..domain.aggregate import AggregateRoot
    from ..domain.events import DomainEvent
    from ..ports.event_handler import EventHandler
    from ..ports.messaging import IMessageBroker

logger = logging.getLogger(__name__)


class DomainEventMediator:
    """Turns an aggregate's pending events into dispatched events.

    Two separate steps, because they have different failure tolerances:

    - :meth:`publish` runs the locally registered handlers for every pending
      event, in the order the aggregate applied them, and marks each event
      dispatched.
    - :meth:`publish_integration_events` derives an integration event from
      every dispatched event that has one and sends it to the message
      broker; the rest are skipped.

    **Failure isolation (collect-all):** a failing handler or broker call
    never stops the remaining ones. Each failure is logged; once everything
    was attempted the failures are raised together as
    :class:`EventDispatchError`.

    Handlers are looked up by the exact event class.
    """

    def __init__(self, message_broker: IMessageBroker | None = None) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = {}
        self._message_broker = message_broker

    # ── Registration ─────────────────────────────────────────────

    def register(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register a local handler for *event_type*. Duplicates are ignored."""
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def get_registered_handlers(self) -> dict[type[DomainEvent], list[EventHandler]]:
        """Return all registered handlers (debugging utility)."""
        return {k: list(v) for k, v in self._handlers.items()}

    def clear(self) -> None:
        """Remove all handler registrations (testing utility)."""
        self._handlers.clear()

    # ── Dispatching ──────────────────────────────────────────────

    async def publish(self, aggregate_root: AggregateRoot[Any]) -> None:
        """Dispatch every pending event of *aggregate_root* to local handlers."""
        errors: list[Exception] = []
        for event in aggregate_root.events:
            for handler in self._handlers.get(type(event), []):
                try:
                    await self._invoke(handler, event)
                except Exception as exc:  # noqa: BLE001
                    logger.exception(
                        "Error executing handler %s for event %s",
                        _handler_name(handler),
                        type(event).__name__,
                    )
                    errors.append(exc)
            aggregate_root.mark_event_dispatched(event)
        if errors:
            raise EventDispatchError(errors)

    async def publish_integration_events(
        self, aggregate_root: AggregateRoot[Any]
    ) -> None:
        """Send the integration event of every dispatched event to the broker."""
        errors: list[Exception] = []
        try:
            for event in aggregate_root.dispatched_events:
                integration_event = event.get_integration_event()
                if integration_event is None:
                    continue
                if self._message_broker is None:
                    logger.debug(
                        "No message broker configured; dropping %s",
                        integration_event.event_name,
                    )
                    continue
                try:
                    await self._message_broker.publish_event(integration_event)
                    logger.info(
                        "Published %s for aggregate %s",
                        integration_event.event_name,
                        event.aggregate_id,
                    )
                except Exception as exc:  # noqa: BLE001
                    logger.exception(
                        "Error publishing integration event %s",
                        integration_event.event_name,
                    )
                    errors.append(exc)
        finally:
            aggregate_root.clear_dispatched_events()
        if errors:
            raise EventDispatchError(errors)

    async def _invoke(self, handler: EventHandler, event: DomainEvent) -> None:
        if hasattr(handler, "handle"):
            result = handler.handle(event)
        elif callable(handler):
            result = handler(event)
        else:
            raise TypeError("Handler must be a callable or have a handle() method")
        if isawaitable(result):
            await result


def _handler_name(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
