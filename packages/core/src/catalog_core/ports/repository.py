"""IRepository / ISearchableRepository — generic repository protocols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from ..domain.aggregate import AggregateRoot
from ..domain.identifiers import Uuid

if TYPE_CHECKING:
    from .search import SearchParams, SearchResult
    from .unit_of_work import UnitOfWork

T = TypeVar("T", bound=AggregateRoot[Any])
ID = TypeVar("ID", bound=Uuid)


@dataclass(frozen=True)
class ExistsResult(Generic[ID]):
    """Partition of requested ids into those found and those missing."""

    exists: list[ID]
    not_exists: list[ID]


@runtime_checkable
class IRepository(Protocol[T, ID]):
    """
    Generic Repository interface for one aggregate type.

    Every method takes an optional ``uow``. When given (and active) the
    call joins its transaction, and writes register the aggregate with it so
    the application service can dispatch its events after commit::

        async with uow:
            await repo.insert(category, uow=uow)

    ``update`` and ``delete`` raise ``NotFoundError`` when nothing matched;
    ``exists_by_id`` raises ``InvalidArgumentError`` for an empty id list.
    """

    async def insert(self, entity: T, uow: UnitOfWork | None = None) -> None: ...

    async def bulk_insert(
        self, entities: list[T], uow: UnitOfWork | None = None
    ) -> None: ...

    async def update(self, entity: T, uow: UnitOfWork | None = None) -> None: ...

    async def delete(self, entity_id: ID, uow: UnitOfWork | None = None) -> None: ...

    async def find_by_id(
        self, entity_id: ID, uow: UnitOfWork | None = None
    ) -> T | None: ...

    async def find_all(self, uow: UnitOfWork | None = None) -> list[T]: ...

    async def find_by_ids(
        self, entity_ids: list[ID], uow: UnitOfWork | None = None
    ) -> list[T]: ...

    async def exists_by_id(
        self, entity_ids: list[ID], uow: UnitOfWork | None = None
    ) -> ExistsResult[ID]: ...


@runtime_checkable
class ISearchableRepository(IRepository[T, ID], Protocol[T, ID]):
    """Repository with the uniform filter / sort / paginate contract.

    ``search`` filters first, counts the filtered set, sorts by an
    allowlisted field (or newest ``created_at`` first), then paginates.
    Ties are broken by creation order and then by id, so every
    implementation returns the same page for the same input.
    """

    sortable_fields: frozenset[str]

    async def search(
        self, params: SearchParams[Any], uow: UnitOfWork | None = None
    ) -> SearchResult[T]: ...
