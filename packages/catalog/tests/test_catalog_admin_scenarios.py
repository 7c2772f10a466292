"""Transaction and repository behaviour shared by every aggregate, on both backends."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from catalog_admin.category.application import CreateCategoryInput, CreateCategoryUseCase
from catalog_admin.category.domain import CategoryId
from catalog_admin.genre.application import CreateGenreInput, CreateGenreUseCase
from catalog_admin.genre.domain import Genre, GenreCreated
from catalog_admin.video.domain import VideoCreated
from catalog_core import EntityValidationError, InMemoryMessageBroker, InvalidArgumentError

if TYPE_CHECKING:
    from catalog_admin import Container
    from catalog_core import UnitOfWork


class CallbackFailed(Exception):
    pass


@pytest.mark.asyncio
async def test_failed_callback_persists_and_dispatches_nothing(
    container: Container, category_builder: type
) -> None:
    handler = MagicMock(spec=[])
    container.mediator.register(GenreCreated, handler)
    category = category_builder().build()
    genre = Genre.create(name="Drama", categories_id=[category.id])
    uow = container.new_unit_of_work()

    async def callback() -> None:
        async def work(uow: UnitOfWork) -> None:
            await container.category_repository.insert(category, uow=uow)
            await container.genre_repository.insert(genre, uow=uow)

        await uow.do(work)
        raise CallbackFailed

    with pytest.raises(CallbackFailed):
        await container.application_service(uow).run(callback)

    assert await container.category_repository.find_by_id(category.id) is None
    assert await container.genre_repository.find_by_id(genre.id) is None
    handler.assert_not_called()
    assert isinstance(container.message_broker, InMemoryMessageBroker)
    assert container.message_broker.published == []
    assert [type(e) for e in genre.events] == [GenreCreated]


@pytest.mark.asyncio
async def test_failed_callback_rolls_back_video_with_other_aggregates(
    container: Container, category_builder: type, video_builder: type
) -> None:
    handler = MagicMock(spec=[])
    container.mediator.register(VideoCreated, handler)
    category = category_builder().build()
    video = video_builder(title="T", categories_id=[category.id]).build()
    uow = container.new_unit_of_work()

    async def callback() -> None:
        async def work(uow: UnitOfWork) -> None:
            await container.category_repository.insert(category, uow=uow)
            await container.video_repository.insert(video, uow=uow)

        await uow.do(work)
        raise CallbackFailed

    with pytest.raises(CallbackFailed):
        await container.application_service(uow).run(callback)

    assert await container.category_repository.find_by_id(category.id) is None
    assert await container.video_repository.find_by_id(video.id) is None
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_successful_callback_commits_then_dispatches(
    container: Container, category_builder: type
) -> None:
    handler = MagicMock(spec=[])
    container.mediator.register(GenreCreated, handler)
    category = category_builder().build()
    genre = Genre.create(name="Drama", categories_id=[category.id])
    uow = container.new_unit_of_work()

    async def callback() -> None:
        async def work(uow: UnitOfWork) -> None:
            await container.category_repository.insert(category, uow=uow)
            await container.genre_repository.insert(genre, uow=uow)

        await uow.do(work)

    await container.application_service(uow).run(callback)

    assert await container.genre_repository.find_by_id(genre.id) is not None
    handler.assert_called_once()
    assert isinstance(container.message_broker, InMemoryMessageBroker)
    assert [e.event_name for e in container.message_broker.published] == [
        "GenreCreatedIntegrationEvent"
    ]
    assert genre.events == ()
    assert genre.dispatched_events == ()


@pytest.mark.asyncio
async def test_concurrent_requests_do_not_share_a_transaction(
    container: Container,
) -> None:
    missing = str(CategoryId())
    creates = [
        container.execute(CreateCategoryUseCase, CreateCategoryInput(name=f"Category {i}"))
        for i in range(5)
    ]
    failures = [
        container.execute(
            CreateGenreUseCase,
            CreateGenreInput(name=f"Genre {i}", categories_id=[missing]),
        )
        for i in range(5)
    ]

    outcomes = await asyncio.gather(*creates, *failures, return_exceptions=True)

    created, failed = outcomes[:5], outcomes[5:]
    assert [type(o).__name__ for o in created] == ["CategoryOutput"] * 5
    assert all(isinstance(o, EntityValidationError) for o in failed)
    stored = await container.category_repository.find_all()
    assert sorted(c.name for c in stored) == [f"Category {i}" for i in range(5)]
    assert await container.genre_repository.find_all() == []
    assert isinstance(container.message_broker, InMemoryMessageBroker)
    assert container.message_broker.events_named("GenreCreatedIntegrationEvent") == []



@pytest.mark.asyncio
@pytest.mark.parametrize(
    "repository",
    [
        "category_repository",
        "cast_member_repository",
        "genre_repository",
        "video_repository",
    ],
)
async def test_exists_by_id_requires_ids(container: Container, repository: str) -> None:
    with pytest.raises(
        InvalidArgumentError, match="ids must be an array with at least one element"
    ):
        await getattr(container, repository).exists_by_id([])


@pytest.mark.asyncio
async def test_exists_by_id_partitions_in_request_order(
    container: Container, category_builder: type
) -> None:
    first, second, missing = category_builder().build_many(3)
    await container.category_repository.bulk_insert([first, second])
    ids = [missing.id, second.id, first.id]

    result = await container.category_repository.exists_by_id(ids)

    assert result.exists == [second.id, first.id]
    assert result.not_exists == [missing.id]
    assert await container.category_repository.exists_by_id(ids) == result
