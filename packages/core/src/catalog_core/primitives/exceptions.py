"""Domain and infrastructure exceptions for catalog-core."""

from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Root exception for the entire catalog toolkit."""


class DomainError(CatalogError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when one or more aggregates cannot be found by identity.

    Update and delete operations that affect zero rows raise this too, so
    callers can map it to a 404-equivalent.
    """

    def __init__(self, entity_id: Any, entity_type: type[Any] | str) -> None:
        ids = entity_id if isinstance(entity_id, list | tuple) else [entity_id]
        self.entity_ids: list[str] = [str(i) for i in ids]
        self.entity_type = (
            entity_type if isinstance(entity_type, str) else entity_type.__name__
        )
        super().__init__(
            f"{self.entity_type} Not Found using ID {', '.join(self.entity_ids)}"
        )


class EntityValidationError(DomainError):
    """Raised when an aggregate's notification holds errors.

    Carries the structured output of ``Notification.to_json()``: a list of
    bare messages and ``{field: [messages]}`` dicts.
    """

    def __init__(
        self,
        errors: list[str | dict[str, list[str]]],
        message: str = "Entity Validation Error",
    ) -> None:
        self.errors = errors
        super().__init__(message)

    def count(self) -> int:
        return len(self.errors)


class InvalidArgumentError(CatalogError):
    """Raised on caller misuse (e.g. an empty id list). Never retried."""


class InvalidUuidError(InvalidArgumentError):
    """Raised when a value is not a valid UUID."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"ID must be a valid UUID, got {value!r}")


class InfrastructureError(CatalogError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class UnitOfWorkError(PersistenceError):
    """Raised when the Unit of Work is used outside its lifecycle."""


class EventDispatchError(CatalogError):
    """Raised after the mediator attempted every handler and some failed.

    ``errors`` keeps the underlying exceptions in the order they occurred.
    """

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = errors
        super().__init__(
            f"{len(errors)} event handler(s) failed. "
            f"First error: {errors[0] if errors else 'unknown'}"
        )
