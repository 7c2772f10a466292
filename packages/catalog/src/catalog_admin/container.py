"""Composition root: builds the object graph from :class:`Settings`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from catalog_core import (
    ApplicationService,
    DomainEventMediator,
    InMemoryMessageBroker,
    InMemoryStorage,
    InMemoryUnitOfWork,
)
from catalog_messaging import RabbitMQConnectionManager, RabbitMQMessageBroker, RoutingTable
from catalog_persistence_sqlalchemy import Base, SQLAlchemyUnitOfWork, build_async_engine

from .cast_member.application import (
    CastMembersIdExistsInDatabaseValidator,
    CreateCastMemberUseCase,
    DeleteCastMemberUseCase,
    GetCastMemberUseCase,
    ListCastMembersUseCase,
    UpdateCastMemberUseCase,
)
from .cast_member.infra.memory import CastMemberInMemoryRepository
from .cast_member.infra.sqlalchemy import CastMemberSQLAlchemyRepository
from .category.application import (
    CategoriesIdExistsInDatabaseValidator,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from .category.infra.memory import CategoryInMemoryRepository
from .category.infra.sqlalchemy import CategorySQLAlchemyRepository
from .config import RepositoryBackend, Settings
from .genre.application import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GenresIdExistsInDatabaseValidator,
    GetGenreUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from .genre.infra.memory import GenreInMemoryRepository
from .genre.infra.sqlalchemy import GenreSQLAlchemyRepository
from .video.application import (
    CreateVideoUseCase,
    DeleteVideoUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
    ProcessAudioVideoMediaUseCase,
    UpdateVideoUseCase,
    UploadAudioVideoMediaUseCase,
    UploadImageMediaUseCase,
)
from .video.infra.memory import VideoInMemoryRepository
from .video.infra.sqlalchemy import VideoSQLAlchemyRepository

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalog_core.ports.messaging import IMessageBroker
    from catalog_core.ports.storage import IStorage
    from catalog_core.ports.unit_of_work import UnitOfWork

    from .cast_member.repository import ICastMemberRepository
    from .category.repository import ICategoryRepository
    from .genre.repository import IGenreRepository
    from .video.repository import IVideoRepository

logger = logging.getLogger(__name__)

TUseCase = TypeVar("TUseCase")

LOGGER_NAMES = (
    "catalog_core",
    "catalog_persistence_sqlalchemy",
    "catalog_messaging",
    "catalog_admin",
)


def configure_logging(level: str | int) -> None:
    """Set the level of every ``catalog_*`` logger."""
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)


@dataclass
class Container:
    """Holds the wired collaborators of one application instance.

    Repositories, broker, storage and mediator are shared. Every call to
    :meth:`execute` gets its own unit of work and application service, so
    concurrent requests never share a transaction.

    Usage::

        container = build_container(Settings())
        await container.create_schema()
        output = await container.execute(
            CreateCategoryUseCase, CreateCategoryInput(name="Movie")
        )
    """

    settings: Settings
    unit_of_work_factory: Callable[[], UnitOfWork]
    category_repository: ICategoryRepository
    cast_member_repository: ICastMemberRepository
    genre_repository: IGenreRepository
    video_repository: IVideoRepository
    message_broker: IMessageBroker
    storage: IStorage
    mediator: DomainEventMediator
    engine: AsyncEngine | None = None
    rabbitmq: RabbitMQConnectionManager | None = None
    _factories: dict[type[Any], Callable[[UnitOfWork], Any]] = field(
        default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        categories_id_validator = CategoriesIdExistsInDatabaseValidator(
            self.category_repository
        )
        genres_id_validator = GenresIdExistsInDatabaseValidator(self.genre_repository)
        cast_members_id_validator = CastMembersIdExistsInDatabaseValidator(
            self.cast_member_repository
        )

        for use_case in (
            CreateCategoryUseCase,
            UpdateCategoryUseCase,
            GetCategoryUseCase,
            DeleteCategoryUseCase,
            ListCategoriesUseCase,
        ):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow, self.category_repository
            )

        for use_case in (
            CreateCastMemberUseCase,
            UpdateCastMemberUseCase,
            GetCastMemberUseCase,
            DeleteCastMemberUseCase,
            ListCastMembersUseCase,
        ):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow, self.cast_member_repository
            )

        for use_case in (CreateGenreUseCase, UpdateGenreUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow,
                self.genre_repository,
                self.category_repository,
                categories_id_validator,
            )
        for use_case in (GetGenreUseCase, DeleteGenreUseCase, ListGenresUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow, self.genre_repository, self.category_repository
            )

        for use_case in (CreateVideoUseCase, UpdateVideoUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow,
                self.video_repository,
                categories_id_validator,
                genres_id_validator,
                cast_members_id_validator,
            )
        for use_case in (GetVideoUseCase, ListVideosUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow,
                self.video_repository,
                self.category_repository,
                self.genre_repository,
                self.cast_member_repository,
            )
        for use_case in (DeleteVideoUseCase, ProcessAudioVideoMediaUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow, self.video_repository
            )
        for use_case in (UploadImageMediaUseCase, UploadAudioVideoMediaUseCase):
            self._factories[use_case] = lambda uow, uc=use_case: uc(
                uow, self.video_repository, self.storage
            )

    def new_unit_of_work(self) -> UnitOfWork:
        return self.unit_of_work_factory()

    def application_service(self, uow: UnitOfWork) -> ApplicationService:
        return ApplicationService(uow, self.mediator)

    def use_case(self, use_case_type: type[TUseCase], uow: UnitOfWork) -> TUseCase:
        """Return a fresh instance of *use_case_type* bound to *uow*."""
        try:
            factory = self._factories[use_case_type]
        except KeyError:
            raise LookupError(f"{use_case_type.__name__} is not registered") from None
        return factory(uow)

    async def execute(self, use_case_type: type[Any], input: Any) -> Any:  # noqa: A002
        """Run *use_case_type* with *input* in a unit of work of its own."""
        uow = self.new_unit_of_work()
        use_case = self.use_case(use_case_type, uow)
        return await self.application_service(uow).run(lambda: use_case.execute(input))


    async def create_schema(self) -> None:
        """Create every mapped table. No-op for the in-memory backend."""
        if self.engine is None:
            return
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self.rabbitmq is not None:
            await self.rabbitmq.close()
        if self.engine is not None:
            await self.engine.dispose()


def build_engine(settings: Settings) -> AsyncEngine:
    return build_async_engine(settings.database_url, echo=settings.database_echo)


def build_container(settings: Settings | None = None) -> Container:
    """Wire a :class:`Container` for *settings* (environment defaults if omitted)."""
    settings = settings or Settings()
    configure_logging(settings.log_level)

    engine: AsyncEngine | None = None
    unit_of_work_factory: Callable[[], UnitOfWork]
    category_repository: ICategoryRepository
    cast_member_repository: ICastMemberRepository
    genre_repository: IGenreRepository
    video_repository: IVideoRepository

    if settings.repository_backend is RepositoryBackend.SQLALCHEMY:
        engine = build_engine(settings)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        unit_of_work_factory = partial(SQLAlchemyUnitOfWork, session_factory=session_factory)
        category_repository = CategorySQLAlchemyRepository(session_factory)
        cast_member_repository = CastMemberSQLAlchemyRepository(session_factory)
        genre_repository = GenreSQLAlchemyRepository(session_factory)
        video_repository = VideoSQLAlchemyRepository(session_factory)
    else:
        unit_of_work_factory = InMemoryUnitOfWork
        category_repository = CategoryInMemoryRepository()
        cast_member_repository = CastMemberInMemoryRepository()
        genre_repository = GenreInMemoryRepository()
        video_repository = VideoInMemoryRepository()

    rabbitmq: RabbitMQConnectionManager | None = None
    message_broker: IMessageBroker
    if settings.rabbitmq_url:
        rabbitmq = RabbitMQConnectionManager(settings.rabbitmq_url)
        message_broker = RabbitMQMessageBroker(
            rabbitmq, RoutingTable(settings.rabbitmq_routes)
        )
    else:
        message_broker = InMemoryMessageBroker()

    logger.info(
        "Catalog wired with %s repositories and %s broker",
        settings.repository_backend.value,
        "rabbitmq" if rabbitmq is not None else "in-memory",
    )

    return Container(
        settings=settings,
        unit_of_work_factory=unit_of_work_factory,
        category_repository=category_repository,
        cast_member_repository=cast_member_repository,
        genre_repository=genre_repository,
        video_repository=video_repository,
        message_broker=message_broker,
        storage=InMemoryStorage(),
        mediator=DomainEventMediator(message_broker),
        engine=engine,
        rabbitmq=rabbitmq,
    )
