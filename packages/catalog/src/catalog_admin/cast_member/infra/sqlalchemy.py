from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_persistence_sqlalchemy.core.models import AggregateModelMixin, Base
from catalog_persistence_sqlalchemy.core.repository import SQLAlchemySearchableRepository

from ..domain import CastMember, CastMemberId, CastMemberType
from ..repository import CastMemberFilter

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class CastMemberModel(AggregateModelMixin, Base):
    __tablename__ = "cast_members"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[int] = mapped_column(Integer, nullable=False)


class CastMemberSQLAlchemyRepository(
    SQLAlchemySearchableRepository[CastMember, CastMemberId, CastMemberFilter]
):
    entity_type = CastMember
    model_type = CastMemberModel
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def to_model(self, entity: CastMember) -> CastMemberModel:
        return CastMemberModel(
            id=str(entity.id),
            name=entity.name,
            type=int(entity.type),
            created_at=entity.created_at,
        )

    def from_model(self, model: Any) -> CastMember:
        return CastMember(
            id=CastMemberId(model.id),
            name=model.name,
            type=CastMemberType(model.type),
            created_at=model.created_at,
        )

    def _filter_clauses(
        self, filter: CastMemberFilter | None  # noqa: A002
    ) -> list[ColumnElement[bool]]:
        if filter is None:
            return []
        clauses: list[ColumnElement[bool]] = []
        if filter.name is not None:
            clauses.append(CastMemberModel.name.icontains(filter.name, autoescape=True))
        if filter.type is not None:
            clauses.append(CastMemberModel.type == int(filter.type))
        return clauses
