"""catalog-core — transactional core of the catalog admin service.

Unit of Work, domain-event mediator and the searchable-repository contract,
plus in-memory adapters. No infrastructure dependencies beyond pydantic.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import (
    InMemoryMessageBroker,
    InMemoryRepository,
    InMemorySearchableRepository,
    InMemoryStorage,
    InMemoryTransaction,
    InMemoryUnitOfWork,
)

# ── Application ─────────────────────────────────────────────────
from .application import (
    ApplicationService,
    DomainEventMediator,
    IdsExistsInDatabaseValidator,
    PaginationOutput,
    UseCase,
)

# ── Domain ──────────────────────────────────────────────────────
from .domain import (
    AggregateRoot,
    DomainEvent,
    IntegrationEvent,
    Notification,
    Uuid,
    ValueObject,
    event_handler,
)

# ── Ports ───────────────────────────────────────────────────────
from .ports import (
    ExistsResult,
    IMessageBroker,
    IRepository,
    ISearchableRepository,
    IStorage,
    SearchParams,
    SearchResult,
    SortDirection,
    StoredObject,
    UnitOfWork,
    UnitOfWorkState,
)

# ── Exceptions ──────────────────────────────────────────────────
from .primitives.exceptions import (
    CatalogError,
    DomainError,
    EntityValidationError,
    EventDispatchError,
    InfrastructureError,
    InvalidArgumentError,
    InvalidUuidError,
    NotFoundError,
    PersistenceError,
    UnitOfWorkError,
)

__all__ = [
    # Adapters
    "InMemoryMessageBroker",
    "InMemoryRepository",
    "InMemorySearchableRepository",
    "InMemoryStorage",
    "InMemoryTransaction",
    "InMemoryUnitOfWork",
    # Application
    "ApplicationService",
    "DomainEventMediator",
    "IdsExistsInDatabaseValidator",
    "PaginationOutput",
    "UseCase",
    # Domain
    "AggregateRoot",
    "DomainEvent",
    "IntegrationEvent",
    "Notification",
    "Uuid",
    "ValueObject",
    "event_handler",
    # Ports
    "ExistsResult",
    "IMessageBroker",
    "IRepository",
    "ISearchableRepository",
    "IStorage",
    "SearchParams",
    "SearchResult",
    "SortDirection",
    "StoredObject",
    "UnitOfWork",
    "UnitOfWorkState",
    # Exceptions
    "CatalogError",
    "DomainError",
    "EntityValidationError",
    "EventDispatchError",
    "InfrastructureError",
    "InvalidArgumentError",
    "InvalidUuidError",
    "NotFoundError",
    "PersistenceError",
    "UnitOfWorkError",
]
