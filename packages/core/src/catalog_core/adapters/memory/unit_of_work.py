"""InMemoryUnitOfWork — undo-log transaction for the in-memory repositories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...ports.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class InMemoryTransaction:
    """Transaction handle of :class:`InMemoryUnitOfWork`.

    In-memory repositories apply writes immediately and record how to undo
    them here. Rollback replays the undo log newest-first; commit forgets it.
    """

    def __init__(self) -> None:
        self._undo_log: list[Callable[[], None]] = []

    def record_undo(self, undo: Callable[[], None]) -> None:
        self._undo_log.append(undo)

    def __len__(self) -> int:
        return len(self._undo_log)

    def commit(self) -> None:
        self._undo_log.clear()

    def rollback(self) -> None:
        while self._undo_log:
            self._undo_log.pop()()


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory implementation of UnitOfWork.

    Every ``start()`` opens a fresh :class:`InMemoryTransaction`.
    Records commit/rollback calls for assertions.
    """

    def __init__(self) -> None:
        super().__init__()
        self._transaction: InMemoryTransaction | None = None
        self.commit_count: int = 0
        self.rollback_count: int = 0

    async def _begin(self) -> None:
        self._transaction = InMemoryTransaction()

    async def _commit(self) -> None:
        if self._transaction is not None:
            self._transaction.commit()
        self._transaction = None
        self.commit_count += 1

    async def _rollback(self) -> None:
        if self._transaction is not None:
            logger.debug("Undoing %d in-memory write(s)", len(self._transaction))
            self._transaction.rollback()
        self._transaction = None
        self.rollback_count += 1

    def _get_transaction(self) -> InMemoryTransaction | None:
        return self._transaction

    # ── Test helpers ─────────────────────────────────────────────

    @property
    def committed(self) -> bool:
        return self.commit_count > 0

    @property
    def rolled_back(self) -> bool:
        return self.rollback_count > 0

    def reset(self) -> None:
        """Reset commit/rollback tracking (for test setup)."""
        self.commit_count = 0
        self.rollback_count = 0
