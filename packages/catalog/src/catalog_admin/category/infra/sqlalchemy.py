from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_persistence_sqlalchemy.core.models import AggregateModelMixin, Base
from catalog_persistence_sqlalchemy.core.repository import SQLAlchemySearchableRepository

from ..domain import Category, CategoryId
from ..repository import CategoryFilter

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class CategoryModel(AggregateModelMixin, Base):
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class CategorySQLAlchemyRepository(
    SQLAlchemySearchableRepository[Category, CategoryId, CategoryFilter]
):
    entity_type = Category
    model_type = CategoryModel
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def to_model(self, entity: Category) -> CategoryModel:
        return CategoryModel(
            id=str(entity.id),
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    def from_model(self, model: Any) -> Category:
        return Category(
            id=CategoryId(model.id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    def _filter_clauses(
        self, filter: CategoryFilter | None  # noqa: A002
    ) -> list[ColumnElement[bool]]:
        if not filter:
            return []
        return [CategoryModel.name.icontains(filter, autoescape=True)]
