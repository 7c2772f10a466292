"""Aggregate Root base class with a typed event-handler registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .events import DomainEvent
from .identifiers import Uuid
from .notification import Notification

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

ID = TypeVar("ID", bound=Uuid)
E = TypeVar("E", bound=DomainEvent)

_HANDLED_EVENT_ATTR = "__handled_event__"


def event_handler(
    event_type: type[E],
) -> Callable[[Callable[[Any, E], None]], Callable[[Any, E], None]]:
    """Mark an aggregate method as the local handler for *event_type*.

    The method runs synchronously inside :meth:`AggregateRoot.apply_event`,
    before the event is queued for external dispatch::

        class Video(AggregateRoot[VideoId]):
            @event_handler(VideoCreated)
            def _on_video_created(self, event: VideoCreated) -> None:
                self._try_mark_as_published()
    """

    def decorator(method: Callable[[Any, E], None]) -> Callable[[Any, E], None]:
        setattr(method, _HANDLED_EVENT_ATTR, event_type)
        return method

    return decorator


class AggregateRoot(BaseModel, Generic[ID]):
    """Base class for all Aggregate Roots.

    Generic over ``ID``, a :class:`Uuid` subclass. An aggregate *is* its
    identity plus history: equality and hashing use ``id`` only.

    Events applied with :meth:`apply_event` stay pending until the domain
    event mediator dispatches them; the aggregate never clears them itself.

    Usage::

        class Genre(AggregateRoot[GenreId]):
            id: GenreId = Field(default_factory=GenreId)
            name: str

            def change_name(self, name: str) -> None:
                self.name = name
                self.apply_event(GenreUpdated(aggregate_id=self.id, name=name))
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    #: Built per class from ``@event_handler`` methods; one handler per type.
    event_handlers: ClassVar[Mapping[type[DomainEvent], Callable[[Any, Any], None]]] = (
        MappingProxyType({})
    )

    id: ID
    _pending_events: list[DomainEvent] = PrivateAttr(default_factory=list)
    _dispatched_events: list[DomainEvent] = PrivateAttr(default_factory=list)
    _notification: Notification = PrivateAttr(default_factory=Notification)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        handlers: dict[type[DomainEvent], Callable[[Any, Any], None]] = {}
        for klass in reversed(cls.__mro__):
            own: set[type[DomainEvent]] = set()
            for attr in vars(klass).values():
                event_type = getattr(attr, _HANDLED_EVENT_ATTR, None)
                if event_type is None:
                    continue
                if event_type in own:
                    raise TypeError(
                        f"{klass.__name__} registers more than one handler "
                        f"for {event_type.__name__}"
                    )
                own.add(event_type)
                handlers[event_type] = attr
        cls.event_handlers = MappingProxyType(handlers)

    # ── Events ───────────────────────────────────────────────────

    def apply_event(self, event: DomainEvent) -> None:
        """Run the local handler for *event* (if any), then queue it."""
        handler = type(self).event_handlers.get(type(event))
        if handler is not None:
            handler(self, event)
        self._pending_events.append(event)

    @property
    def events(self) -> tuple[DomainEvent, ...]:
        """Pending events in emission order."""
        return tuple(self._pending_events)

    def mark_event_dispatched(self, event: DomainEvent) -> None:
        """Move *event* from pending to dispatched. Used by the mediator."""
        for index, pending in enumerate(self._pending_events):
            if pending is event:
                del self._pending_events[index]
                self._dispatched_events.append(event)
                return

    @property
    def dispatched_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._dispatched_events)

    def clear_dispatched_events(self) -> None:
        self._dispatched_events.clear()

    # ── Validation ───────────────────────────────────────────────

    @property
    def notification(self) -> Notification:
        return self._notification

    def validate_fields(self, fields: Sequence[str] | None = None) -> bool:
        """Record validation errors on :attr:`notification`.

        Subclasses override this; return ``True`` when no errors were added.
        """
        return not self._notification.has_errors()

    # ── Identity ─────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot) or type(other) is not type(self):
            return False
        return bool(self.id == other.id)

    def __hash__(self) -> int:
        return hash((type(self), self.id))
