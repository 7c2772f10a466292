from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_core.domain.aggregate import AggregateRoot
from catalog_core.domain.identifiers import Uuid
from catalog_core.ports.repository import ExistsResult
from catalog_core.ports.search import SearchParams, SearchResult, SortDirection
from catalog_core.primitives.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    UnitOfWorkError,
)

from ..exceptions import MappingError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from sqlalchemy import ColumnElement, Select

    from catalog_core.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=AggregateRoot[Any])
ID = TypeVar("ID", bound=Uuid)
FilterT = TypeVar("FilterT")


class SQLAlchemyRepository(Generic[T, ID]):
    """
    Implementation of ``IRepository`` using SQLAlchemy.

    Separates the domain entity type (``entity_type``, a pydantic
    ``AggregateRoot``) from the persistence model (``model_type``, a
    ``DeclarativeBase`` subclass with ``id`` and ``created_at`` columns).
    Subclasses implement ``to_model`` / ``from_model``.

    Supports two session patterns per call:

    1. **UoW-bound** (writes are part of the unit):
       ``await repo.insert(category, uow=uow)``
       Statements run on ``uow.get_transaction()`` and the aggregate is
       registered with the unit. Nothing is committed here.

    2. **Standalone**:
       ``await repo.insert(category)``
       A short-lived session is opened from ``session_factory`` and
       committed when the call returns.
    """

    entity_type: ClassVar[type[AggregateRoot[Any]]]
    model_type: ClassVar[type[Any]]

    def __init__(self, session_factory: Callable[[], AsyncSession] | None = None) -> None:
        self._session_factory = session_factory

    # -- mapping ------------------------------------------------------------

    @abstractmethod
    def to_model(self, entity: T) -> Any:
        """Convert domain entity → SQLAlchemy model."""

    @abstractmethod
    def from_model(self, model: Any) -> T:
        """Convert SQLAlchemy model → domain entity."""

    def _from_model(self, model: Any) -> T:
        try:
            return self.from_model(model)
        except (TypeError, ValueError) as e:
            raise MappingError(
                f"Cannot map {type(model).__name__} {getattr(model, 'id', '?')} "
                f"to {self.entity_type.__name__}: {e}"
            ) from e

    # -- session helpers ----------------------------------------------------

    @asynccontextmanager
    async def _session(self, uow: UnitOfWork | None = None) -> AsyncIterator[AsyncSession]:
        transaction = uow.get_transaction() if uow is not None else None
        if isinstance(transaction, AsyncSession):
            yield transaction
            return
        if self._session_factory is None:
            raise UnitOfWorkError(
                f"{type(self).__name__} needs an active SQLAlchemyUnitOfWork "
                "or a session_factory."
            )
        async with self._session_factory() as session, session.begin():
            yield session

    @staticmethod
    def _register(entity: T, uow: UnitOfWork | None) -> None:
        if uow is not None and uow.is_active:
            uow.add_aggregate_root(entity)

    # -- CRUD ---------------------------------------------------------------

    async def insert(self, entity: T, uow: UnitOfWork | None = None) -> None:
        async with self._session(uow) as session:
            session.add(self.to_model(entity))
            await session.flush()
        self._register(entity, uow)

    async def bulk_insert(self, entities: list[T], uow: UnitOfWork | None = None) -> None:
        async with self._session(uow) as session:
            session.add_all([self.to_model(entity) for entity in entities])
            await session.flush()
        for entity in entities:
            self._register(entity, uow)

    async def update(self, entity: T, uow: UnitOfWork | None = None) -> None:
        async with self._session(uow) as session:
            existing = await session.get(self.model_type, str(entity.id))
            if existing is None:
                raise NotFoundError(entity.id, self.entity_type)
            await session.merge(self.to_model(entity))
            await session.flush()
        self._register(entity, uow)

    async def delete(self, entity_id: ID, uow: UnitOfWork | None = None) -> None:
        async with self._session(uow) as session:
            existing = await session.get(self.model_type, str(entity_id))
            if existing is None:
                raise NotFoundError(entity_id, self.entity_type)
            await session.delete(existing)
            await session.flush()

    async def find_by_id(self, entity_id: ID, uow: UnitOfWork | None = None) -> T | None:
        async with self._session(uow) as session:
            model = await session.get(self.model_type, str(entity_id))
            return None if model is None else self._from_model(model)

    async def find_all(self, uow: UnitOfWork | None = None) -> list[T]:
        async with self._session(uow) as session:
            result = await session.execute(select(self.model_type))
            return [self._from_model(m) for m in result.scalars().all()]

    async def find_by_ids(
        self, entity_ids: list[ID], uow: UnitOfWork | None = None
    ) -> list[T]:
        if not entity_ids:
            return []
        async with self._session(uow) as session:
            result = await session.execute(
                select(self.model_type).where(
                    self.model_type.id.in_([str(i) for i in entity_ids])
                )
            )
            return [self._from_model(m) for m in result.scalars().all()]

    async def exists_by_id(
        self, entity_ids: list[ID], uow: UnitOfWork | None = None
    ) -> ExistsResult[ID]:
        if not entity_ids:
            raise InvalidArgumentError("ids must be an array with at least one element")
        async with self._session(uow) as session:
            result = await session.execute(
                select(self.model_type.id).where(
                    self.model_type.id.in_([str(i) for i in entity_ids])
                )
            )
            found = set(result.scalars().all())
        return ExistsResult(
            exists=[i for i in entity_ids if str(i) in found],
            not_exists=[i for i in entity_ids if str(i) not in found],
        )


class SQLAlchemySearchableRepository(SQLAlchemyRepository[T, ID], Generic[T, ID, FilterT]):
    """
    Adds ``search`` to :class:`SQLAlchemyRepository`.

    Subclasses declare ``sortable_fields`` (names of model columns) and
    implement ``_filter_clauses``. Rows are ordered by the requested column
    (or ``created_at DESC`` by default), then ``created_at ASC``, then
    ``id ASC``, matching the in-memory implementation.
    """

    sortable_fields: ClassVar[frozenset[str]] = frozenset()

    async def search(
        self, params: SearchParams[FilterT], uow: UnitOfWork | None = None
    ) -> SearchResult[T]:
        clauses = self._filter_clauses(params.filter)
        count_query = select(func.count()).select_from(self.model_type).where(*clauses)
        query = self._apply_sort(
            select(self.model_type).where(*clauses), params.sort, params.sort_dir
        )
        query = query.offset(params.offset).limit(params.limit)

        async with self._session(uow) as session:
            total = (await session.execute(count_query)).scalar_one()
            result = await session.execute(query)
            items = [self._from_model(m) for m in result.scalars().all()]

        logger.debug(
            "%s.search matched %d row(s), returning page %d",
            type(self).__name__,
            total,
            params.page,
        )
        return SearchResult(
            items=items,
            total=total,
            current_page=params.page,
            per_page=params.per_page,
        )

    @abstractmethod
    def _filter_clauses(self, filter: FilterT | None) -> list[ColumnElement[bool]]:  # noqa: A002
        """Return WHERE clauses for *filter*; an empty list matches everything."""

    def _apply_sort(
        self, query: Select[Any], sort: str | None, sort_dir: SortDirection | None
    ) -> Select[Any]:
        model = self.model_type
        if sort is None or sort not in self.sortable_fields:
            return query.order_by(model.created_at.desc(), model.id.asc())
        column = getattr(model, sort)
        primary = column.desc() if sort_dir is SortDirection.DESC else column.asc()
        return query.order_by(primary, model.created_at.asc(), model.id.asc())
