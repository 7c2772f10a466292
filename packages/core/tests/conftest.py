import pytest

from catalog_core.adapters.memory import InMemoryMessageBroker, InMemoryUnitOfWork
from catalog_core.application import ApplicationService, DomainEventMediator


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture
def broker() -> InMemoryMessageBroker:
    return InMemoryMessageBroker()


@pytest.fixture
def mediator(broker: InMemoryMessageBroker) -> DomainEventMediator:
    return DomainEventMediator(broker)


@pytest.fixture
def service(uow: InMemoryUnitOfWork, mediator: DomainEventMediator) -> ApplicationService:
    return ApplicationService(uow, mediator)
