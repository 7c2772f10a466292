"""
SQLAlchemy implementation of the Unit of Work pattern.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catalog_core.ports.unit_of_work import UnitOfWork

from ..exceptions import SessionManagementError

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.ext.asyncio import AsyncSession

    AsyncSessionFactory = Callable[[], AsyncSession]

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work implementation using SQLAlchemy AsyncSession.

    The transaction handle returned by ``get_transaction()`` is the
    ``AsyncSession``; repositories called with this unit run their
    statements on it.

    Supports two usage patterns:

    1. **Caller-Managed Sessions**:
       ```python
       async with SQLAlchemyUnitOfWork(session=session) as uow:
           await repo.insert(category, uow=uow)
       ```
       The session lifecycle is managed by the caller.

    2. **Self-Managed Sessions**:
       ```python
       factory = async_sessionmaker(engine, expire_on_commit=False)
       uow = SQLAlchemyUnitOfWork(session_factory=factory)
       await service.run(lambda: use_case.execute(input))
       ```
       Every ``start()`` opens a fresh session; it is closed after commit
       or rollback.

    **Important:** Exactly one of `session` or `session_factory` must be provided.
    """

    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: AsyncSessionFactory | None = None,
    ) -> None:
        if session is not None and session_factory is not None:
            raise SessionManagementError(
                "Cannot provide both 'session' and 'session_factory'. "
                "Use either caller-managed (session) or self-managed "
                "(session_factory) pattern."
            )

        if session is None and session_factory is None:
            raise SessionManagementError(
                "Must provide either 'session' or 'session_factory'. "
                "Use caller-managed pattern with session=(AsyncSession) "
                "or self-managed pattern with session_factory=(callable)."
            )

        self._session: AsyncSession | None = session
        self._session_factory = session_factory
        self._owns_session = session_factory is not None
        super().__init__()

    @property
    def session(self) -> AsyncSession | None:
        return self._session

    async def _begin(self) -> None:
        try:
            if self._owns_session and self._session_factory is not None:
                self._session = self._session_factory()
            if self._session is None:
                raise SessionManagementError("No session available to begin.")
            if not self._session.in_transaction():
                await self._session.begin()
        except Exception as e:  # noqa: BLE001
            # Catch all exceptions during session initialization and wrap them
            if isinstance(e, SessionManagementError):
                raise
            raise SessionManagementError(f"Failed to initialize UoW: {e}") from e

    async def _commit(self) -> None:
        if self._session is None:
            raise SessionManagementError("No session to commit.")
        await self._session.commit()
        await self._release()

    async def _rollback(self) -> None:
        if self._session is None:
            return
        try:
            if self._session.in_transaction():
                await self._session.rollback()
        finally:
            await self._release()

    def _get_transaction(self) -> AsyncSession | None:
        return self._session

    async def _release(self) -> None:
        if not self._owns_session or self._session is None:
            return
        session, self._session = self._session, None
        try:
            await session.close()
        except Exception as e:  # noqa: BLE001
            raise SessionManagementError(f"Failed to close session: {e}") from e
