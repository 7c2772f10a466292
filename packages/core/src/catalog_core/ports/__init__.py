from .event_handler import EventHandler, IDomainEventHandler
from .messaging import IMessageBroker
from .repository import ExistsResult, IRepository, ISearchableRepository
from .search import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    SearchParams,
    SearchResult,
    SortDirection,
)
from .storage import IStorage, StoredObject
from .unit_of_work import UnitOfWork, UnitOfWorkState

__all__ = [
    "DEFAULT_PER_PAGE",
    "EventHandler",
    "IDomainEventHandler",
    "ExistsResult",
    "IMessageBroker",
    "IRepository",
    "ISearchableRepository",
    "IStorage",
    "MAX_PER_PAGE",
    "SearchParams",
    "SearchResult",
    "SortDirection",
    "StoredObject",
    "UnitOfWork",
    "UnitOfWorkState",
]
