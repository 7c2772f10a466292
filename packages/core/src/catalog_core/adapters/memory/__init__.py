from .message_broker import InMemoryMessageBroker
from .repository import InMemoryRepository, InMemorySearchableRepository
from .storage import InMemoryStorage
from .unit_of_work import InMemoryTransaction, InMemoryUnitOfWork

__all__ = [
    "InMemoryMessageBroker",
    "InMemoryRepository",
    "InMemorySearchableRepository",
    "InMemoryStorage",
    "InMemoryTransaction",
    "InMemoryUnitOfWork",
]
