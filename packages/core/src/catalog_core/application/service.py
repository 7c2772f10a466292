"""ApplicationService — runs a use case inside one unit of work."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ..primitives.exceptions import EventDispatchError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..domain.aggregate import AggregateRoot
    from ..ports.unit_of_work import UnitOfWork
    from .mediator import DomainEventMediator

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class ApplicationService:
    """Orchestrates ``start -> callback -> finish | fail``.

    Guarantees that no domain or integration event is dispatched for a write
    that did not commit: events are only mediated after ``commit()``
    returned, and a failing callback rolls everything back.

    Usage::

        service = ApplicationService(uow, mediator)
        output = await service.run(lambda: use_case.execute(input))
    """

    def __init__(self, uow: UnitOfWork, domain_event_mediator: DomainEventMediator) -> None:
        self.uow = uow
        self.domain_event_mediator = domain_event_mediator

    async def start(self) -> None:
        await self.uow.start()

    async def finish(self) -> None:
        """Commit, then publish the events of every tracked aggregate.

        Event dispatch happens after the commit, so a failing handler cannot
        undo the write; dispatch errors are logged, not raised.
        """
        aggregate_roots = self.uow.get_aggregate_roots()
        try:
            await self.uow.commit()
        except Exception:
            await self.fail()
            raise
        for aggregate_root in aggregate_roots:
            await self._dispatch(aggregate_root)

    async def fail(self) -> None:
        await self.uow.rollback()

    async def run(self, callback: Callable[[], Awaitable[TResult]]) -> TResult:
        await self.start()
        try:
            result = await callback()
        except Exception:
            await self.fail()
            raise
        await self.finish()
        return result

    async def _dispatch(self, aggregate_root: AggregateRoot[Any]) -> None:
        try:
            await self.domain_event_mediator.publish(aggregate_root)
        except EventDispatchError as exc:
            logger.error(
                "Local event dispatch failed after commit for %s %s: %s",
                type(aggregate_root).__name__,
                aggregate_root.id,
                exc,
            )
        try:
            await self.domain_event_mediator.publish_integration_events(aggregate_root)
        except EventDispatchError as exc:
            logger.error(
                "Integration event publication failed after commit for %s %s: %s",
                type(aggregate_root).__name__,
                aggregate_root.id,
                exc,
            )
