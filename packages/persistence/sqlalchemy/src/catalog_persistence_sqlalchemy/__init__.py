"""SQLAlchemy Persistence Adapter."""

from __future__ import annotations

from .core.engine import build_async_engine
from .core.models import AggregateModelMixin, Base
from .core.repository import SQLAlchemyRepository, SQLAlchemySearchableRepository
from .core.types import UtcDateTime
from .core.uow import SQLAlchemyUnitOfWork
from .exceptions import (
    MappingError,
    SessionManagementError,
    SQLAlchemyPersistenceError,
    UnitOfWorkError,
)

__all__ = [
    "AggregateModelMixin",
    "Base",
    "MappingError",
    "SessionManagementError",
    "SQLAlchemyPersistenceError",
    "SQLAlchemyRepository",
    "SQLAlchemySearchableRepository",
    "SQLAlchemyUnitOfWork",
    "UnitOfWorkError",
    "UtcDateTime",
    "build_async_engine",
]
