"""UUID-backed identity value object."""

from __future__ import annotations

import uuid

from pydantic import Field

from ..primitives.exceptions import InvalidUuidError
from .value_object import ValueObject


class Uuid(ValueObject):
    """Opaque identity wrapping a UUID string.

    Usage::

        class CategoryId(Uuid):
            pass

        CategoryId()                                        # random v4
        CategoryId("9366b7dc-2d71-4799-b91c-c64adb205104")  # explicit
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    def __init__(self, id: str | uuid.UUID | None = None, **data: object) -> None:  # noqa: A002
        if id is not None:
            data["id"] = self._validate(id)
        super().__init__(**data)

    @staticmethod
    def _validate(value: str | uuid.UUID) -> str:
        if isinstance(value, uuid.UUID):
            return str(value)
        try:
            return str(uuid.UUID(str(value)))
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidUuidError(value) from e

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.id!r})"
