"""Category use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from catalog_core.application.pagination import PaginationOutput
from catalog_core.application.use_case import UseCase
from catalog_core.primitives.exceptions import EntityValidationError, NotFoundError

from ..domain import Category, CategoryId
from ..repository import CategorySearchParams
from .outputs import CategoryOutput

if TYPE_CHECKING:
    from catalog_core.ports.unit_of_work import UnitOfWork

    from ..repository import ICategoryRepository


class CreateCategoryInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    is_active: bool = True


class UpdateCategoryInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    description: str | None = None
    is_active: bool | None = None


class GetCategoryInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class DeleteCategoryInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class ListCategoriesInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Any = None
    per_page: Any = None
    sort: str | None = None
    sort_dir: str | None = None
    filter: str | None = None


class _CategoryUseCase:
    def __init__(self, uow: UnitOfWork, category_repository: ICategoryRepository) -> None:
        self._uow = uow
        self._category_repository = category_repository


class CreateCategoryUseCase(_CategoryUseCase, UseCase[CreateCategoryInput, CategoryOutput]):
    async def execute(self, input: CreateCategoryInput) -> CategoryOutput:  # noqa: A002
        entity = Category.create(
            name=input.name, description=input.description, is_active=input.is_active
        )
        if entity.notification.has_errors():
            raise EntityValidationError(entity.notification.to_json())

        await self._uow.do(lambda uow: self._category_repository.insert(entity, uow=uow))
        return CategoryOutput.from_entity(entity)


class UpdateCategoryUseCase(_CategoryUseCase, UseCase[UpdateCategoryInput, CategoryOutput]):
    async def execute(self, input: UpdateCategoryInput) -> CategoryOutput:  # noqa: A002
        category_id = CategoryId(input.id)
        entity = await self._category_repository.find_by_id(category_id, uow=self._uow)
        if entity is None:
            raise NotFoundError(input.id, Category)

        if input.name is not None:
            entity.change_name(input.name)
        if "description" in input.model_fields_set:
            entity.change_description(input.description)
        if input.is_active is True:
            entity.activate()
        elif input.is_active is False:
            entity.deactivate()

        if entity.notification.has_errors():
            raise EntityValidationError(entity.notification.to_json())

        await self._uow.do(lambda uow: self._category_repository.update(entity, uow=uow))
        return CategoryOutput.from_entity(entity)


class GetCategoryUseCase(_CategoryUseCase, UseCase[GetCategoryInput, CategoryOutput]):
    async def execute(self, input: GetCategoryInput) -> CategoryOutput:  # noqa: A002
        entity = await self._category_repository.find_by_id(
            CategoryId(input.id), uow=self._uow
        )
        if entity is None:
            raise NotFoundError(input.id, Category)
        return CategoryOutput.from_entity(entity)


class DeleteCategoryUseCase(_CategoryUseCase, UseCase[DeleteCategoryInput, None]):
    async def execute(self, input: DeleteCategoryInput) -> None:  # noqa: A002
        category_id = CategoryId(input.id)
        await self._uow.do(
            lambda uow: self._category_repository.delete(category_id, uow=uow)
        )


class ListCategoriesUseCase(
    _CategoryUseCase,
    UseCase[ListCategoriesInput, PaginationOutput[CategoryOutput]],
):
    async def execute(
        self, input: ListCategoriesInput  # noqa: A002
    ) -> PaginationOutput[CategoryOutput]:
        params = CategorySearchParams.model_validate(input.model_dump())
        result = await self._category_repository.search(params, uow=self._uow)
        return PaginationOutput.from_search_result(
            [CategoryOutput.from_entity(item) for item in result.items], result
        )
