"""IntegrationEventSerializer — JSON roundtrip for integration events."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from catalog_core.domain.events import IntegrationEvent

from .exceptions import MessagingSerializationError


def _json_serializer(obj: Any) -> Any:
    """Serialize datetime and other non-JSON types."""
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class IntegrationEventSerializer:
    """Serialize/deserialize :class:`IntegrationEvent` to/from JSON bytes.

    The wire format is the event itself: ``event_name``, ``event_version``,
    ``occurred_on`` (ISO-8601) and ``payload``.
    """

    content_type = "application/json"

    def serialize(self, event: IntegrationEvent) -> bytes:
        """Encode *event* to JSON bytes."""
        try:
            data = event.model_dump(mode="json")
            return json.dumps(data, default=_json_serializer).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise MessagingSerializationError(str(e)) from e

    def deserialize(self, raw: bytes) -> IntegrationEvent:
        """Decode JSON bytes to an :class:`IntegrationEvent`."""
        try:
            return IntegrationEvent.model_validate(json.loads(raw.decode("utf-8")))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise MessagingSerializationError(str(e)) from e
