from __future__ import annotations

import pytest

from catalog_admin import Container
from catalog_admin.category.domain import CategoryId
from catalog_admin.genre.application import (
    CreateGenreInput,
    CreateGenreUseCase,
    DeleteGenreInput,
    DeleteGenreUseCase,
    GetGenreInput,
    GetGenreUseCase,
    ListGenresInput,
    ListGenresUseCase,
    UpdateGenreInput,
    UpdateGenreUseCase,
)
from catalog_admin.genre.domain import Genre, GenreCreated, GenreDeleted, GenreUpdated
from catalog_admin.genre.repository import GenreSearchParams
from catalog_core import EntityValidationError, InMemoryMessageBroker, InvalidArgumentError


# --- Domain ---


def test_create_applies_genre_created() -> None:
    category_id = CategoryId()
    genre = Genre.create(name="Drama", categories_id=[category_id, category_id])

    assert list(genre.categories_id.values()) == [category_id]
    [event] = genre.events
    assert isinstance(event, GenreCreated)
    assert event.categories_id == [category_id]


def test_state_changes_apply_genre_updated() -> None:
    genre = Genre.create(name="Drama")
    genre.change_name("Comedy")
    genre.deactivate()
    genre.sync_categories_id([CategoryId()])

    assert [type(e) for e in genre.events] == [
        GenreCreated,
        GenreUpdated,
        GenreUpdated,
        GenreUpdated,
    ]
    assert genre.events[-1].name == "Comedy"
    assert genre.events[-1].is_active is False


def test_add_and_remove_category_apply_no_event() -> None:
    genre = Genre.create(name="Drama")
    category_id = CategoryId()

    genre.add_category_id(category_id)
    genre.add_category_id(category_id)
    assert list(genre.categories_id.values()) == [category_id]

    genre.remove_category_id(category_id)
    genre.remove_category_id(category_id)
    assert genre.categories_id == {}
    assert len(genre.events) == 1


def test_sync_with_no_categories_is_rejected() -> None:
    genre = Genre.create(name="Drama")
    with pytest.raises(InvalidArgumentError, match="Categories ID cannot be empty"):
        genre.sync_categories_id([])


def test_integration_payloads_are_keyed_by_genre_id() -> None:
    genre = Genre.create(name="Drama", is_active=False)
    genre.mark_as_deleted()
    created, deleted = genre.events

    created_event = created.get_integration_event()
    assert created_event.event_name == "GenreCreatedIntegrationEvent"
    assert created_event.payload["genre_id"] == str(genre.id)
    assert created_event.payload["is_active"] is False
    assert deleted.get_integration_event().payload == {"genre_id": str(genre.id)}


def test_categories_filter_accepts_strings() -> None:
    category_id = CategoryId()
    params = GenreSearchParams(filter={"categories_id": [str(category_id)]})

    assert params.filter is not None
    assert params.filter.categories_id == [category_id]
    assert GenreSearchParams(filter={"categories_id": []}).filter is None


# --- Use cases ---


@pytest.mark.asyncio
async def test_create_genre_returns_related_categories(
    container: Container, category_builder: type
) -> None:
    movie = category_builder(name="Movie").build()
    series = category_builder(name="Series").build()
    await container.category_repository.bulk_insert([movie, series])

    output = await container.execute(
        CreateGenreUseCase,
        CreateGenreInput(name="Drama", categories_id=[str(series.id), str(movie.id)]),
    )

    assert output.categories_id == [str(series.id), str(movie.id)]
    assert sorted(c.name for c in output.categories) == ["Movie", "Series"]
    assert output.is_active is True


@pytest.mark.asyncio
async def test_create_genre_with_unknown_categories_fails(
    container: Container, category_builder: type
) -> None:
    known = category_builder().build()
    await container.category_repository.insert(known)
    missing = CategoryId()

    with pytest.raises(EntityValidationError) as exc_info:
        await container.execute(
            CreateGenreUseCase,
            CreateGenreInput(name="", categories_id=[str(known.id), str(missing)]),
        )

    assert exc_info.value.errors == [
        {"name": ["name should not be empty"]},
        {"categories_id": [f"Category Not Found using ID {missing}"]},
    ]
    assert await container.genre_repository.find_all() == []


@pytest.mark.asyncio
async def test_update_get_and_delete_genre(
    container: Container, category_builder: type, genre_builder: type
) -> None:
    movie = category_builder(name="Movie").build()
    series = category_builder(name="Series").build()
    await container.category_repository.bulk_insert([movie, series])
    genre = genre_builder(categories_id=[movie.id]).build()
    await container.genre_repository.insert(genre)

    await container.execute(
        UpdateGenreUseCase,
        UpdateGenreInput(
            id=str(genre.id), name="Horror", categories_id=[str(series.id)], is_active=False
        ),
    )
    fetched = await container.execute(GetGenreUseCase, GetGenreInput(id=str(genre.id)))

    assert (fetched.name, fetched.is_active) == ("Horror", False)
    assert fetched.categories_id == [str(series.id)]
    assert [c.name for c in fetched.categories] == ["Series"]

    await container.execute(DeleteGenreUseCase, DeleteGenreInput(id=str(genre.id)))
    assert await container.genre_repository.find_by_id(genre.id) is None


@pytest.mark.asyncio
async def test_update_with_unknown_categories_keeps_stored_genre(
    container: Container, category_builder: type, genre_builder: type
) -> None:
    movie = category_builder().build()
    await container.category_repository.insert(movie)
    genre = genre_builder(name="Drama", categories_id=[movie.id]).build()
    await container.genre_repository.insert(genre)

    with pytest.raises(EntityValidationError):
        await container.execute(
            UpdateGenreUseCase,
            UpdateGenreInput(id=str(genre.id), name="Horror", categories_id=[str(CategoryId())]),
        )

    stored = await container.genre_repository.find_by_id(genre.id)
    assert stored is not None
    assert stored.name == "Drama"
    assert list(stored.categories_id.values()) == [movie.id]


@pytest.mark.asyncio
async def test_filter_genres_by_categories(
    container: Container, category_builder: type, genre_builder: type
) -> None:
    movie = category_builder(name="Movie").build()
    series = category_builder(name="Series").build()
    await container.category_repository.bulk_insert([movie, series])
    await container.genre_repository.bulk_insert(
        [
            genre_builder(name="Drama", categories_id=[movie.id]).build(),
            genre_builder(name="Comedy", categories_id=[series.id]).build(),
            genre_builder(name="Dramedy", categories_id=[movie.id, series.id]).build(),
        ]
    )

    by_movie = await container.execute(
        ListGenresUseCase,
        ListGenresInput(filter={"categories_id": [str(movie.id)]}, sort="name"),
    )
    by_name_and_series = await container.execute(
        ListGenresUseCase,
        ListGenresInput(filter={"name": "dram", "categories_id": [str(series.id)]}),
    )

    assert [g.name for g in by_movie.items] == ["Drama", "Dramedy"]
    assert by_movie.total == 2
    assert [g.name for g in by_name_and_series.items] == ["Dramedy"]
    assert sorted(c.name for c in by_name_and_series.items[0].categories) == [
        "Movie",
        "Series",
    ]


# --- Integration events ---


@pytest.mark.asyncio
async def test_genre_integration_events_are_published_after_commit(
    memory_container: Container, category_builder: type
) -> None:
    broker = memory_container.message_broker
    assert isinstance(broker, InMemoryMessageBroker)
    movie = category_builder().build()
    await memory_container.category_repository.insert(movie)

    created = await memory_container.execute(
        CreateGenreUseCase, CreateGenreInput(name="Drama", categories_id=[str(movie.id)])
    )
    await memory_container.execute(
        UpdateGenreUseCase, UpdateGenreInput(id=created.id, name="Horror")
    )
    await memory_container.execute(DeleteGenreUseCase, DeleteGenreInput(id=created.id))

    assert [e.event_name for e in broker.published] == [
        "GenreCreatedIntegrationEvent",
        "GenreUpdatedIntegrationEvent",
        "GenreDeletedIntegrationEvent",
    ]
    assert all(e.payload["genre_id"] == created.id for e in broker.published)
    assert broker.published[1].payload["name"] == "Horror"


@pytest.mark.asyncio
async def test_failed_create_publishes_nothing(memory_container: Container) -> None:
    broker = memory_container.message_broker
    assert isinstance(broker, InMemoryMessageBroker)

    with pytest.raises(EntityValidationError):
        await memory_container.execute(
            CreateGenreUseCase, CreateGenreInput(name="Drama", categories_id=[str(CategoryId())])
        )

    assert broker.published == []
