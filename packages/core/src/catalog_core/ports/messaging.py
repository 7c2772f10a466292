from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.events import IntegrationEvent


@runtime_checkable
class IMessageBroker(Protocol):
    """
    Port for publishing integration events to a broker (RabbitMQ, …).

    The core depends on this single method only; exchanges, routing keys and
    serialization are configuration of the infrastructure adapter.
    """

    async def publish_event(self, event: IntegrationEvent) -> None:
        """Publish *event* to its configured destination."""
        ...
