"""InMemoryRepository — dict-backed repositories with the search contract."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ...domain.aggregate import AggregateRoot
from ...domain.identifiers import Uuid
from ...ports.repository import ExistsResult
from ...ports.search import SearchParams, SearchResult, SortDirection
from ...primitives.exceptions import InvalidArgumentError, NotFoundError
from .unit_of_work import InMemoryTransaction

if TYPE_CHECKING:
    from ...ports.unit_of_work import UnitOfWork

T = TypeVar("T", bound=AggregateRoot[Any])
ID = TypeVar("ID", bound=Uuid)
FilterT = TypeVar("FilterT")


class InMemoryRepository(Generic[T, ID]):
    """In-memory implementation of ``IRepository[T, ID]``.

    Stores detached copies of the aggregates in a dict keyed by ``id``, so
    mutating a loaded aggregate never changes the store behind the caller's
    back. Reads return fresh copies without pending events, like a row
    loaded from a database.

    Writes made with an active :class:`InMemoryUnitOfWork` are applied at
    once and undone if the unit rolls back.
    """

    entity_type: ClassVar[type[AggregateRoot[Any]]]

    def __init__(self) -> None:
        self._store: dict[ID, T] = {}

    # ── Writes ───────────────────────────────────────────────────

    async def insert(self, entity: T, uow: UnitOfWork | None = None) -> None:
        self._put(entity, uow)

    async def bulk_insert(
        self, entities: list[T], uow: UnitOfWork | None = None
    ) -> None:
        for entity in entities:
            self._put(entity, uow)

    async def update(self, entity: T, uow: UnitOfWork | None = None) -> None:
        if entity.id not in self._store:
            raise NotFoundError(entity.id, self.entity_type)
        self._put(entity, uow)

    async def delete(self, entity_id: ID, uow: UnitOfWork | None = None) -> None:
        if entity_id not in self._store:
            raise NotFoundError(entity_id, self.entity_type)
        removed = self._store.pop(entity_id)
        self._record_undo(uow, lambda: self._store.__setitem__(entity_id, removed))

    # ── Reads ────────────────────────────────────────────────────

    async def find_by_id(
        self,
        entity_id: ID,
        uow: UnitOfWork | None = None,  # noqa: ARG002
    ) -> T | None:
        entity = self._store.get(entity_id)
        return None if entity is None else self._detach(entity)

    async def find_all(
        self,
        uow: UnitOfWork | None = None,  # noqa: ARG002
    ) -> list[T]:
        return [self._detach(entity) for entity in self._store.values()]

    async def find_by_ids(
        self,
        entity_ids: list[ID],
        uow: UnitOfWork | None = None,  # noqa: ARG002
    ) -> list[T]:
        wanted = set(entity_ids)
        return [
            self._detach(entity)
            for entity_id, entity in self._store.items()
            if entity_id in wanted
        ]

    async def exists_by_id(
        self,
        entity_ids: list[ID],
        uow: UnitOfWork | None = None,  # noqa: ARG002
    ) -> ExistsResult[ID]:
        if not entity_ids:
            raise InvalidArgumentError("ids must be an array with at least one element")
        exists: list[ID] = []
        not_exists: list[ID] = []
        for entity_id in entity_ids:
            (exists if entity_id in self._store else not_exists).append(entity_id)
        return ExistsResult(exists=exists, not_exists=not_exists)

    # ── Internals ────────────────────────────────────────────────

    def _put(self, entity: T, uow: UnitOfWork | None) -> None:
        entity_id = entity.id
        previous = self._store.get(entity_id)
        self._store[entity_id] = self._detach(entity)

        def undo() -> None:
            if previous is None:
                self._store.pop(entity_id, None)
            else:
                self._store[entity_id] = previous

        self._record_undo(uow, undo)
        if uow is not None and uow.is_active:
            uow.add_aggregate_root(entity)

    def _record_undo(self, uow: UnitOfWork | None, undo: Any) -> None:
        if uow is None:
            return
        transaction = uow.get_transaction()
        if isinstance(transaction, InMemoryTransaction):
            transaction.record_undo(undo)

    @staticmethod
    def _detach(entity: T) -> T:
        return type(entity).model_validate(entity.model_dump())

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


class InMemorySearchableRepository(InMemoryRepository[T, ID], Generic[T, ID, FilterT]):
    """Adds ``search`` to :class:`InMemoryRepository`.

    Subclasses declare ``sortable_fields`` and implement ``_apply_filter``.
    Ordering matches the SQL implementation exactly: the requested field
    (or ``created_at`` descending by default), then ``created_at``
    ascending, then ``id`` ascending.
    """

    sortable_fields: ClassVar[frozenset[str]] = frozenset()

    async def search(
        self,
        params: SearchParams[FilterT],
        uow: UnitOfWork | None = None,  # noqa: ARG002
    ) -> SearchResult[T]:
        items = list(self._store.values())
        filtered = self._apply_filter(items, params.filter)
        ordered = self._apply_sort(filtered, params.sort, params.sort_dir)
        page = ordered[params.offset : params.offset + params.limit]
        return SearchResult(
            items=[self._detach(entity) for entity in page],
            total=len(filtered),
            current_page=params.page,
            per_page=params.per_page,
        )

    @abstractmethod
    def _apply_filter(self, items: list[T], filter: FilterT | None) -> list[T]:  # noqa: A002
        """Return the items matching *filter*; all of them when it is ``None``."""

    def _apply_sort(
        self, items: list[T], sort: str | None, sort_dir: SortDirection | None
    ) -> list[T]:
        # Stable multi-pass sort, least significant key first.
        ordered = sorted(items, key=lambda e: str(e.id))
        if sort is None or sort not in self.sortable_fields:
            return sorted(ordered, key=lambda e: e.created_at, reverse=True)
        ordered.sort(key=lambda e: e.created_at)
        ordered.sort(
            key=lambda e: self._sort_value(e, sort),
            reverse=sort_dir is SortDirection.DESC,
        )
        return ordered

    def _sort_value(self, entity: T, field: str) -> Any:
        return getattr(entity, field)

    # ── Filter helpers ───────────────────────────────────────────

    @staticmethod
    def _contains(value: str, needle: str) -> bool:
        return needle.lower() in value.lower()
