"""Cast member use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from catalog_core.application.pagination import PaginationOutput
from catalog_core.application.use_case import UseCase
from catalog_core.primitives.exceptions import EntityValidationError, NotFoundError

from ..domain import CastMember, CastMemberId, CastMemberType
from ..repository import CastMemberSearchParams
from .outputs import CastMemberOutput

if TYPE_CHECKING:
    from catalog_core.ports.unit_of_work import UnitOfWork

    from ..repository import ICastMemberRepository


class CreateCastMemberInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: CastMemberType


class UpdateCastMemberInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    type: CastMemberType | None = None


class GetCastMemberInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class DeleteCastMemberInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class ListCastMembersInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Any = None
    per_page: Any = None
    sort: str | None = None
    sort_dir: str | None = None
    filter: dict[str, Any] | None = None


class _CastMemberUseCase:
    def __init__(
        self, uow: UnitOfWork, cast_member_repository: ICastMemberRepository
    ) -> None:
        self._uow = uow
        self._cast_member_repository = cast_member_repository


class CreateCastMemberUseCase(
    _CastMemberUseCase, UseCase[CreateCastMemberInput, CastMemberOutput]
):
    async def execute(self, input: CreateCastMemberInput) -> CastMemberOutput:  # noqa: A002
        entity = CastMember.create(name=input.name, type=input.type)
        if entity.notification.has_errors():
            raise EntityValidationError(entity.notification.to_json())

        await self._uow.do(
            lambda uow: self._cast_member_repository.insert(entity, uow=uow)
        )
        return CastMemberOutput.from_entity(entity)


class UpdateCastMemberUseCase(
    _CastMemberUseCase, UseCase[UpdateCastMemberInput, CastMemberOutput]
):
    async def execute(self, input: UpdateCastMemberInput) -> CastMemberOutput:  # noqa: A002
        entity = await self._cast_member_repository.find_by_id(
            CastMemberId(input.id), uow=self._uow
        )
        if entity is None:
            raise NotFoundError(input.id, CastMember)

        if input.name is not None:
            entity.change_name(input.name)
        if input.type is not None:
            entity.change_type(input.type)

        if entity.notification.has_errors():
            raise EntityValidationError(entity.notification.to_json())

        await self._uow.do(
            lambda uow: self._cast_member_repository.update(entity, uow=uow)
        )
        return CastMemberOutput.from_entity(entity)


class GetCastMemberUseCase(_CastMemberUseCase, UseCase[GetCastMemberInput, CastMemberOutput]):
    async def execute(self, input: GetCastMemberInput) -> CastMemberOutput:  # noqa: A002
        entity = await self._cast_member_repository.find_by_id(
            CastMemberId(input.id), uow=self._uow
        )
        if entity is None:
            raise NotFoundError(input.id, CastMember)
        return CastMemberOutput.from_entity(entity)


class DeleteCastMemberUseCase(_CastMemberUseCase, UseCase[DeleteCastMemberInput, None]):
    async def execute(self, input: DeleteCastMemberInput) -> None:  # noqa: A002
        cast_member_id = CastMemberId(input.id)
        await self._uow.do(
            lambda uow: self._cast_member_repository.delete(cast_member_id, uow=uow)
        )


class ListCastMembersUseCase(
    _CastMemberUseCase,
    UseCase[ListCastMembersInput, PaginationOutput[CastMemberOutput]],
):
    async def execute(
        self, input: ListCastMembersInput  # noqa: A002
    ) -> PaginationOutput[CastMemberOutput]:
        params = CastMemberSearchParams.model_validate(input.model_dump())
        result = await self._cast_member_repository.search(params, uow=self._uow)
        return PaginationOutput.from_search_result(
            [CastMemberOutput.from_entity(item) for item in result.items], result
        )
