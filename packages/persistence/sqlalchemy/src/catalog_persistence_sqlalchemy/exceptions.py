"""Exceptions for the SQLAlchemy persistence layer."""

from __future__ import annotations

from catalog_core.primitives.exceptions import PersistenceError, UnitOfWorkError


class SQLAlchemyPersistenceError(PersistenceError):
    """Base exception for all SQLAlchemy-specific persistence errors."""


class SessionManagementError(SQLAlchemyPersistenceError):
    """Raised when session creation or management fails."""


class MappingError(SQLAlchemyPersistenceError):
    """Raised when mapping between domain entities and DB models fails."""


__all__: list[str] = [
    "MappingError",
    "SessionManagementError",
    "SQLAlchemyPersistenceError",
    "UnitOfWorkError",
]
