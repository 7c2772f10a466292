"""Event-name → (exchange, routing key) routing table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .exceptions import RouteNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    exchange: str
    routing_key: str


class RoutingTable:
    """Resolves the destination of an integration event by its ``event_name``."""

    def __init__(self, routes: Mapping[str, Route] | None = None) -> None:
        self._routes: dict[str, Route] = dict(routes or {})

    def add(self, event_name: str, route: Route) -> None:
        self._routes[event_name] = route

    def resolve(self, event_name: str) -> Route:
        try:
            return self._routes[event_name]
        except KeyError:
            raise RouteNotFoundError(event_name) from None

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._routes

    def __len__(self) -> int:
        return len(self._routes)
