"""Messaging-specific exceptions for catalog-messaging."""

from __future__ import annotations

from catalog_core.primitives.exceptions import InfrastructureError


class MessagingError(InfrastructureError):
    """Base class for all messaging-related infrastructure errors."""


class MessagingConnectionError(MessagingError):
    """Raised when connectivity to the message broker fails."""


class MessagingSerializationError(MessagingError):
    """Raised when message serialization or deserialization fails."""


class RouteNotFoundError(MessagingError):
    """Raised when an integration event has no configured exchange/routing key."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(f"No route configured for integration event {event_name!r}")
