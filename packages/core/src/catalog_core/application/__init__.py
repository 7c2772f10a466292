from .mediator import DomainEventMediator
from .pagination import PaginationOutput
from .service import ApplicationService
from .use_case import UseCase
from .validators import IdsExistsInDatabaseValidator

__all__ = [
    "ApplicationService",
    "DomainEventMediator",
    "IdsExistsInDatabaseValidator",
    "PaginationOutput",
    "UseCase",
]
