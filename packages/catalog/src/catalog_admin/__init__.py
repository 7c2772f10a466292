"""catalog-admin — the video catalog administration bounded contexts."""

from __future__ import annotations

from .config import RepositoryBackend, Settings, load_settings
from .container import Container, build_container, configure_logging

__all__ = [
    "Container",
    "RepositoryBackend",
    "Settings",
    "build_container",
    "configure_logging",
    "load_settings",
]
