"""Reference-id existence checks shared by the use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..domain.identifiers import Uuid
from ..primitives.exceptions import NotFoundError

if TYPE_CHECKING:
    from ..ports.repository import IRepository
    from ..ports.unit_of_work import UnitOfWork

ID = TypeVar("ID", bound=Uuid)


class IdsExistsInDatabaseValidator(Generic[ID]):
    """Checks that every referenced id exists in one repository.

    Returns ``(ids, [])`` when all ids exist and ``([], errors)`` otherwise,
    with one :class:`NotFoundError` per missing id so the caller can put the
    messages on a notification field::

        ids, errors = await validator.validate(input.categories_id)
        if errors:
            notification.set_error([str(e) for e in errors], "categories_id")
    """

    id_type: ClassVar[type[Uuid]]
    entity_type: ClassVar[type[Any]]

    def __init__(self, repository: IRepository[Any, ID]) -> None:
        self._repository = repository

    async def validate(
        self, ids: list[str], uow: UnitOfWork | None = None
    ) -> tuple[list[ID], list[NotFoundError]]:
        entity_ids: list[ID] = [self.id_type(i) for i in ids]  # type: ignore[misc]
        result = await self._repository.exists_by_id(entity_ids, uow=uow)
        if result.not_exists:
            return [], [NotFoundError(i, self.entity_type) for i in result.not_exists]
        return entity_ids, []
