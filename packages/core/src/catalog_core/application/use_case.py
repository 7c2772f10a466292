"""UseCase base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class UseCase(ABC, Generic[TInput, TOutput]):
    """Base class for application use cases.

    Use cases do their writes through ``uow.do(...)`` and never commit;
    callers wrap them in :meth:`ApplicationService.run`::

        output = await service.run(lambda: create_category.execute(input))
    """

    @abstractmethod
    async def execute(self, input: TInput) -> TOutput:  # noqa: A002
        """Run the use case and return its output."""
        ...
