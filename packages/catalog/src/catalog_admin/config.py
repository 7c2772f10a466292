"""Configuration management.

Settings come from ``CATALOG_``-prefixed environment variables, validated by
pydantic-settings (``CATALOG_REPOSITORY_BACKEND=sqlalchemy``). Event names are
case-sensitive, so the routing table is given as JSON::

    CATALOG_RABBITMQ_ROUTES='{"VideoDeletedIntegrationEvent":
        {"exchange": "amq.direct", "routing_key": "videos.deleted"}}'
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from catalog_messaging import Route


class RepositoryBackend(str, Enum):
    MEMORY = "memory"
    SQLALCHEMY = "sqlalchemy"


def _default_routes() -> dict[str, Route]:
    return {
        "GenreCreatedIntegrationEvent": Route(
            exchange="amq.direct", routing_key="GenreCreatedIntegrationEvent"
        ),
        "GenreUpdatedIntegrationEvent": Route(
            exchange="amq.direct", routing_key="GenreUpdatedIntegrationEvent"
        ),
        "GenreDeletedIntegrationEvent": Route(
            exchange="amq.direct", routing_key="GenreDeletedIntegrationEvent"
        ),
        "AudioVideoMediaUploadedIntegrationEvent": Route(
            exchange="amq.direct", routing_key="AudioVideoMediaReplacedEvent"
        ),
        "VideoDeletedIntegrationEvent": Route(
            exchange="amq.direct", routing_key="VideoDeletedIntegrationEvent"
        ),
    }


class Settings(BaseSettings):
    """Top-level application settings."""

    # Persistence
    repository_backend: RepositoryBackend = RepositoryBackend.MEMORY
    database_url: str = "sqlite+aiosqlite:///:memory:"
    database_echo: bool = False

    # Messaging; no url means integration events stay in process
    rabbitmq_url: str | None = None
    rabbitmq_routes: dict[str, Route] = Field(default_factory=_default_routes)

    log_level: str = "INFO"

    model_config = {"env_prefix": "CATALOG_", "env_nested_delimiter": "__"}


def load_settings(overrides: dict[str, Any] | None = None) -> Settings:
    """Load settings from the environment, with *overrides* applied on top."""
    return Settings(**(overrides or {}))
