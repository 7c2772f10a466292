from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_core.adapters.memory import InMemoryMessageBroker, InMemoryStorage
from catalog_core.domain.events import IntegrationEvent
from catalog_core.ports.messaging import IMessageBroker
from catalog_core.ports.storage import IStorage, StoredObject
from catalog_core.primitives.exceptions import NotFoundError


def _event(name: str) -> IntegrationEvent:
    return IntegrationEvent(event_name=name, occurred_on=datetime.now(timezone.utc))


@pytest.mark.asyncio
async def test_broker_records_and_forwards_to_subscribers() -> None:
    broker = InMemoryMessageBroker()
    sync_handler = MagicMock()
    async_handler = AsyncMock()
    broker.subscribe("A", sync_handler)
    broker.subscribe("A", async_handler)

    first, second = _event("A"), _event("B")
    await broker.publish_event(first)
    await broker.publish_event(second)

    assert broker.published == [first, second]
    assert broker.events_named("A") == [first]
    sync_handler.assert_called_once_with(first)
    async_handler.assert_awaited_once_with(first)

    broker.clear()
    assert broker.published == []


@pytest.mark.asyncio
async def test_storage_round_trip_and_missing_file() -> None:
    storage = InMemoryStorage()
    await storage.store(id="videos/1/a.mp4", data=b"bytes", mime_type="video/mp4")

    assert "videos/1/a.mp4" in storage
    assert await storage.get("videos/1/a.mp4") == StoredObject(
        id="videos/1/a.mp4", data=b"bytes", mime_type="video/mp4"
    )
    with pytest.raises(NotFoundError, match="File Not Found using ID missing"):
        await storage.get("missing")


def test_adapters_satisfy_ports() -> None:
    assert isinstance(InMemoryMessageBroker(), IMessageBroker)
    assert isinstance(InMemoryStorage(), IStorage)
