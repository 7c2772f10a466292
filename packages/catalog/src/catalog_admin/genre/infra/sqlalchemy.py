from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Boolean, ForeignKey, String, select
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_persistence_sqlalchemy.core.models import AggregateModelMixin, Base
from catalog_persistence_sqlalchemy.core.repository import SQLAlchemySearchableRepository

from ...category.domain import CategoryId
from ..domain import Genre, GenreId
from ..repository import GenreFilter

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class GenreCategoryModel(Base):
    __tablename__ = "genres_categories"

    genre_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    )


class GenreModel(AggregateModelMixin, Base):
    __tablename__ = "genres"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    categories: Mapped[list[GenreCategoryModel]] = relationship(
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=GenreCategoryModel.category_id,
    )


class GenreSQLAlchemyRepository(
    SQLAlchemySearchableRepository[Genre, GenreId, GenreFilter]
):
    entity_type = Genre
    model_type = GenreModel
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"name", "created_at"})

    def to_model(self, entity: Genre) -> GenreModel:
        return GenreModel(
            id=str(entity.id),
            name=entity.name,
            is_active=entity.is_active,
            created_at=entity.created_at,
            categories=[
                GenreCategoryModel(genre_id=str(entity.id), category_id=category_id)
                for category_id in entity.categories_id
            ],
        )

    def from_model(self, model: Any) -> Genre:
        return Genre(
            id=GenreId(model.id),
            name=model.name,
            is_active=model.is_active,
            created_at=model.created_at,
            categories_id={
                link.category_id: CategoryId(link.category_id)
                for link in model.categories
            },
        )

    def _filter_clauses(
        self, filter: GenreFilter | None  # noqa: A002
    ) -> list[ColumnElement[bool]]:
        if filter is None:
            return []
        clauses: list[ColumnElement[bool]] = []
        if filter.name is not None:
            clauses.append(GenreModel.name.icontains(filter.name, autoescape=True))
        if filter.categories_id:
            clauses.append(
                GenreModel.id.in_(
                    select(GenreCategoryModel.genre_id).where(
                        GenreCategoryModel.category_id.in_(
                            [str(c) for c in filter.categories_id]
                        )
                    )
                )
            )
        return clauses
