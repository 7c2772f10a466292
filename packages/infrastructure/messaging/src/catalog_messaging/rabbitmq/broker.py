"""RabbitMQMessageBroker — IMessageBroker over aio-pika with a routing table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aio_pika

from ..serialization import IntegrationEventSerializer

if TYPE_CHECKING:
    from catalog_core.domain.events import IntegrationEvent

    from ..routing import RoutingTable
    from .connection import RabbitMQConnectionManager

logger = logging.getLogger(__name__)


class RabbitMQMessageBroker:
    """RabbitMQ adapter implementing ``IMessageBroker``.

    Each integration event is sent to the exchange and routing key its
    ``event_name`` maps to in the routing table; an unmapped event raises
    :class:`~catalog_messaging.exceptions.RouteNotFoundError` before
    anything is sent.
    """

    def __init__(
        self,
        connection: RabbitMQConnectionManager,
        routes: RoutingTable,
        *,
        serializer: IntegrationEventSerializer | None = None,
    ) -> None:
        self._connection = connection
        self._routes = routes
        self._serializer = serializer or IntegrationEventSerializer()

    async def publish_event(self, event: IntegrationEvent) -> None:
        route = self._routes.resolve(event.event_name)
        body = self._serializer.serialize(event)
        exchange = await self._connection.get_exchange(route.exchange)
        await exchange.publish(
            aio_pika.Message(
                body=body,
                content_type=self._serializer.content_type,
                delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
                headers={
                    "event_name": event.event_name,
                    "event_version": event.event_version,
                },
            ),
            routing_key=route.routing_key,
        )
        logger.debug(
            "Sent %s to exchange %s with routing key %s",
            event.event_name,
            route.exchange,
            route.routing_key,
        )

    async def health_check(self) -> bool:
        return await self._connection.health_check()
