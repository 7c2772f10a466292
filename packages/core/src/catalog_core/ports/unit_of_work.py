"""UnitOfWork — Abstract base class for the Unit of Work pattern."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from ..primitives.exceptions import UnitOfWorkError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from ..domain.aggregate import AggregateRoot

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class UnitOfWorkState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class UnitOfWork(ABC):
    """
    Abstract base class for Unit of Work implementations.

    Binds one transactional resource to the set of aggregates touched while
    it is active. The lifecycle is::

        idle -> active (start) -> committed | rolled_back -> (start again)

    Subclasses only implement the transaction primitives (``_begin``,
    ``_commit``, ``_rollback``, ``_get_transaction``); state handling and
    aggregate tracking live here.

    Guarantees:

    - ``start()`` is a no-op while a transaction is already active.
    - A failing ``commit()`` propagates the error unchanged and keeps both the
      transaction and the tracked aggregates, so the caller decides when to
      roll back.
    - Tracked aggregates are cleared after a successful commit or a rollback.
    - ``do()`` never commits; committing is left to the caller
      (usually :class:`~catalog_core.application.service.ApplicationService`).

    Example:
        ```python
        class SQLAlchemyUnitOfWork(UnitOfWork):
            async def _begin(self):
                await self._session.begin()

            async def _commit(self):
                await self._session.commit()

            async def _rollback(self):
                await self._session.rollback()

            def _get_transaction(self):
                return self._session
        ```
    """

    def __init__(self) -> None:
        self._state = UnitOfWorkState.IDLE
        # dict keeps registration order; keys are deduplicated by aggregate id
        self._aggregate_roots: dict[AggregateRoot[Any], None] = {}

    # ── State ────────────────────────────────────────────────────

    @property
    def state(self) -> UnitOfWorkState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is UnitOfWorkState.ACTIVE

    # ── Lifecycle ────────────────────────────────────────────────

    async def start(self) -> None:
        """Open a transaction. No-op if one is already active."""
        if self.is_active:
            return
        await self._begin()
        self._state = UnitOfWorkState.ACTIVE
        logger.debug("%s started", type(self).__name__)

    async def commit(self) -> None:
        """Commit the active transaction and forget the tracked aggregates."""
        if not self.is_active:
            raise UnitOfWorkError("Cannot commit: the unit of work is not active.")
        try:
            await self._commit()
        except Exception:
            logger.error(
                "%s failed to commit; %d aggregate(s) still tracked",
                type(self).__name__,
                len(self._aggregate_roots),
            )
            raise
        self._aggregate_roots.clear()
        self._state = UnitOfWorkState.COMMITTED
        logger.debug("%s committed", type(self).__name__)

    async def rollback(self) -> None:
        """Discard the active transaction and the tracked aggregates."""
        try:
            if self.is_active:
                await self._rollback()
                self._state = UnitOfWorkState.ROLLED_BACK
                logger.debug("%s rolled back", type(self).__name__)
        finally:
            self._aggregate_roots.clear()

    async def do(
        self, work_fn: Callable[[UnitOfWork], Awaitable[TResult]]
    ) -> TResult:
        """Start (if needed) and run *work_fn* inside this unit. Never commits."""
        await self.start()
        return await work_fn(self)

    def get_transaction(self) -> Any:
        """Return the transaction handle, or ``None`` when not active."""
        if not self.is_active:
            return None
        return self._get_transaction()

    # ── Aggregate tracking ───────────────────────────────────────

    def add_aggregate_root(self, aggregate_root: AggregateRoot[Any]) -> None:
        """Track *aggregate_root*; registering the same identity twice is a no-op."""
        if not self.is_active:
            raise UnitOfWorkError(
                "Aggregates can only be registered while the unit of work is active."
            )
        self._aggregate_roots.setdefault(aggregate_root, None)

    def get_aggregate_roots(self) -> list[AggregateRoot[Any]]:
        return list(self._aggregate_roots)

    # ── Context manager ──────────────────────────────────────────

    async def __aenter__(self) -> UnitOfWork:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Commit if the block succeeded and nothing committed yet, else rollback."""
        if exc_type is None:
            if self.is_active:
                await self.commit()
        else:
            await self.rollback()

    # ── Transaction primitives ───────────────────────────────────

    @abstractmethod
    async def _begin(self) -> None: ...

    @abstractmethod
    async def _commit(self) -> None: ...

    @abstractmethod
    async def _rollback(self) -> None: ...

    @abstractmethod
    def _get_transaction(self) -> Any: ...
