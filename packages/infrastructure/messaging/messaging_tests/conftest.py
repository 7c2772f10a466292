"""Pytest fixtures for messaging tests."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_core.domain.events import IntegrationEvent


@pytest.fixture
def mock_connection() -> MagicMock:
    conn = MagicMock()
    conn.health_check = AsyncMock(return_value=True)
    mock_exchange = MagicMock()
    mock_exchange.publish = AsyncMock()
    conn.get_exchange = AsyncMock(return_value=mock_exchange)
    return conn


@pytest.fixture
def uploaded_event() -> IntegrationEvent:
    return IntegrationEvent(
        event_name="AudioVideoMediaUploadedIntegrationEvent",
        occurred_on=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
        payload={
            "resource_id": "9366b7dc-2d71-4799-b91c-c64adb205104.video",
            "file_path": "videos/9366b7dc-2d71-4799-b91c-c64adb205104/video.mp4",
        },
    )
