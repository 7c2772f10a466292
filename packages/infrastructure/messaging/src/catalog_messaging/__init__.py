"""catalog-messaging — integration event publishing over RabbitMQ."""

from __future__ import annotations

from .exceptions import (
    MessagingConnectionError,
    MessagingError,
    MessagingSerializationError,
    RouteNotFoundError,
)
from .rabbitmq import RabbitMQConnectionManager, RabbitMQMessageBroker
from .routing import Route, RoutingTable
from .serialization import IntegrationEventSerializer

__all__ = [
    "IntegrationEventSerializer",
    "MessagingConnectionError",
    "MessagingError",
    "MessagingSerializationError",
    "RabbitMQConnectionManager",
    "RabbitMQMessageBroker",
    "Route",
    "RouteNotFoundError",
    "RoutingTable",
]
