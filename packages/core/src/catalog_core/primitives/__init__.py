from .exceptions import (
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
