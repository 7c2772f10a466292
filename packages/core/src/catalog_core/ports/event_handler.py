"""Local (in-process) domain event handler shapes accepted by the mediator."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar, Union, runtime_checkable

if TYPE_CHECKING:
    from ..domain.events import DomainEvent

E_contra = TypeVar("E_contra", bound="DomainEvent", contravariant=True)


@runtime_checkable
class IDomainEventHandler(Protocol[E_contra]):
    """Handler object exposing ``handle(event)``; may be sync or async."""

    def handle(self, event: E_contra) -> Awaitable[None] | None: ...


#: A plain callable or a handler object. Sync and async are both accepted.
EventHandler: TypeAlias = Union[
    Callable[["DomainEvent"], Awaitable[None] | None],
    IDomainEventHandler["DomainEvent"],
]
