"""
Async engine construction with the SQLite adjustments the repositories rely on.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def _unicode_lower(value: str | None) -> str | None:
    return None if value is None else value.lower()


def _register_sqlite_functions(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    # SQLite's built-in lower() only folds ASCII; icontains filters must fold
    # like str.lower() so results match the in-memory repositories.
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def build_async_engine(url: str, *, echo: bool = False, **kwargs: Any) -> AsyncEngine:
    """
    Create an :class:`AsyncEngine` for *url*.

    For SQLite, ``lower()`` is replaced by a Unicode-aware version on every
    new connection, and ``:memory:`` databases use a :class:`StaticPool`
    (one shared connection, otherwise every session sees an empty database).
    In-memory SQLite therefore has a single transaction at a time; use a
    file database when units of work run concurrently.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite and ":memory:" in url:
        kwargs.setdefault("poolclass", StaticPool)
    engine = create_async_engine(url, echo=echo, **kwargs)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _register_sqlite_functions)
        logger.debug("Registered Unicode lower() for %s", engine.url.render_as_string())
    return engine
