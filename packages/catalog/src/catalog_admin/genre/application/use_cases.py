"""Genre use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from catalog_core.application.pagination import PaginationOutput
from catalog_core.application.use_case import UseCase
from catalog_core.primitives.exceptions import EntityValidationError, NotFoundError

from ..domain import Genre, GenreId
from ..repository import GenreSearchParams
from .outputs import GenreOutput

if TYPE_CHECKING:
    from catalog_core.ports.unit_of_work import UnitOfWork

    from ...category.application.validators import CategoriesIdExistsInDatabaseValidator
    from ...category.domain import CategoryId
    from ...category.repository import ICategoryRepository
    from ..repository import IGenreRepository


class CreateGenreInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    categories_id: list[str]
    is_active: bool = True


class UpdateGenreInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    categories_id: list[str] | None = None
    is_active: bool | None = None


class GetGenreInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class DeleteGenreInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class ListGenresInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Any = None
    per_page: Any = None
    sort: str | None = None
    sort_dir: str | None = None
    filter: dict[str, Any] | None = None


class _GenreUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        genre_repository: IGenreRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._uow = uow
        self._genre_repository = genre_repository
        self._category_repository = category_repository

    async def _to_output(self, genre: Genre) -> GenreOutput:
        categories = []
        if genre.categories_id:
            categories = await self._category_repository.find_by_ids(
                list(genre.categories_id.values()), uow=self._uow
            )
        return GenreOutput.from_entity(genre, categories)


class CreateGenreUseCase(_GenreUseCase, UseCase[CreateGenreInput, GenreOutput]):
    def __init__(
        self,
        uow: UnitOfWork,
        genre_repository: IGenreRepository,
        category_repository: ICategoryRepository,
        categories_id_validator: CategoriesIdExistsInDatabaseValidator,
    ) -> None:
        super().__init__(uow, genre_repository, category_repository)
        self._categories_id_validator = categories_id_validator

    async def execute(self, input: CreateGenreInput) -> GenreOutput:  # noqa: A002
        categories_id: list[CategoryId] = []
        errors = []
        if input.categories_id:
            categories_id, errors = await self._categories_id_validator.validate(
                input.categories_id, uow=self._uow
            )

        genre = Genre.create(
            name=input.name, categories_id=categories_id, is_active=input.is_active
        )
        if errors:
            genre.notification.set_error([str(e) for e in errors], "categories_id")
        if genre.notification.has_errors():
            raise EntityValidationError(genre.notification.to_json())

        await self._uow.do(lambda uow: self._genre_repository.insert(genre, uow=uow))
        return await self._to_output(genre)


class UpdateGenreUseCase(_GenreUseCase, UseCase[UpdateGenreInput, GenreOutput]):
    def __init__(
        self,
        uow: UnitOfWork,
        genre_repository: IGenreRepository,
        category_repository: ICategoryRepository,
        categories_id_validator: CategoriesIdExistsInDatabaseValidator,
    ) -> None:
        super().__init__(uow, genre_repository, category_repository)
        self._categories_id_validator = categories_id_validator

    async def execute(self, input: UpdateGenreInput) -> GenreOutput:  # noqa: A002
        genre = await self._genre_repository.find_by_id(GenreId(input.id), uow=self._uow)
        if genre is None:
            raise NotFoundError(input.id, Genre)

        if input.name is not None:
            genre.change_name(input.name)
        if input.is_active is True:
            genre.activate()
        elif input.is_active is False:
            genre.deactivate()

        if input.categories_id is not None:
            categories_id, errors = await self._categories_id_validator.validate(
                input.categories_id, uow=self._uow
            )
            if errors:
                genre.notification.set_error([str(e) for e in errors], "categories_id")
            else:
                genre.sync_categories_id(categories_id)

        if genre.notification.has_errors():
            raise EntityValidationError(genre.notification.to_json())

        await self._uow.do(lambda uow: self._genre_repository.update(genre, uow=uow))
        return await self._to_output(genre)


class GetGenreUseCase(_GenreUseCase, UseCase[GetGenreInput, GenreOutput]):
    async def execute(self, input: GetGenreInput) -> GenreOutput:  # noqa: A002
        genre = await self._genre_repository.find_by_id(GenreId(input.id), uow=self._uow)
        if genre is None:
            raise NotFoundError(input.id, Genre)
        return await self._to_output(genre)


class DeleteGenreUseCase(_GenreUseCase, UseCase[DeleteGenreInput, None]):
    async def execute(self, input: DeleteGenreInput) -> None:  # noqa: A002
        genre_id = GenreId(input.id)
        genre = await self._genre_repository.find_by_id(genre_id, uow=self._uow)
        if genre is None:
            raise NotFoundError(input.id, Genre)
        genre.mark_as_deleted()

        async def work(uow: UnitOfWork) -> None:
            await self._genre_repository.delete(genre_id, uow=uow)
            uow.add_aggregate_root(genre)

        await self._uow.do(work)


class ListGenresUseCase(_GenreUseCase, UseCase[ListGenresInput, PaginationOutput[GenreOutput]]):
    async def execute(self, input: ListGenresInput) -> PaginationOutput[GenreOutput]:  # noqa: A002
        params = GenreSearchParams.model_validate(input.model_dump())
        result = await self._genre_repository.search(params, uow=self._uow)

        related_ids = {
            category_id.id: category_id
            for genre in result.items
            for category_id in genre.categories_id.values()
        }
        categories = []
        if related_ids:
            categories = await self._category_repository.find_by_ids(
                list(related_ids.values()), uow=self._uow
            )
        return PaginationOutput.from_search_result(
            [GenreOutput.from_entity(genre, categories) for genre in result.items], result
        )
