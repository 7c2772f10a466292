from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .types import UtcDateTime


class Base(DeclarativeBase):
    """
    Declarative base for all catalog SQLAlchemy models.

    Models used with
    :class:`~catalog_persistence_sqlalchemy.core.repository.SQLAlchemySearchableRepository`
    should mix in :class:`AggregateModelMixin` so the repository can sort by
    ``created_at`` and ``id``.
    """


class AggregateModelMixin:
    """String UUID primary key plus the ``created_at`` ordering column."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False, index=True)
