from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog_admin import Container
from catalog_admin.cast_member.application import (
    CreateCastMemberInput,
    CreateCastMemberUseCase,
    DeleteCastMemberInput,
    DeleteCastMemberUseCase,
    GetCastMemberInput,
    GetCastMemberUseCase,
    ListCastMembersInput,
    ListCastMembersUseCase,
    UpdateCastMemberInput,
    UpdateCastMemberUseCase,
)
from catalog_admin.cast_member.domain import CastMember, CastMemberId, CastMemberType
from catalog_admin.cast_member.repository import CastMemberFilter, CastMemberSearchParams
from catalog_core import EntityValidationError, NotFoundError


def test_create_cast_member() -> None:
    cast_member = CastMember.create(name="John", type=CastMemberType.DIRECTOR)

    assert cast_member.type is CastMemberType.DIRECTOR
    assert not cast_member.notification.has_errors()


def test_change_name_validates() -> None:
    cast_member = CastMember.create(name="John", type=CastMemberType.ACTOR)
    cast_member.change_name("")
    assert cast_member.notification.to_json() == [{"name": ["name should not be empty"]}]


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CreateCastMemberInput(name="John", type=3)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ({}, None),
        ({"name": ""}, None),
        ({"name": "jo"}, CastMemberFilter(name="jo")),
        ({"type": 1}, CastMemberFilter(type=CastMemberType.DIRECTOR)),
    ],
)
def test_empty_filters_are_dropped(raw: object, expected: CastMemberFilter | None) -> None:
    assert CastMemberSearchParams(filter=raw).filter == expected


@pytest.mark.asyncio
async def test_cast_member_lifecycle(container: Container) -> None:
    created = await container.execute(
        CreateCastMemberUseCase,
        CreateCastMemberInput(name="John", type=CastMemberType.DIRECTOR),
    )
    updated = await container.execute(
        UpdateCastMemberUseCase,
        UpdateCastMemberInput(id=created.id, type=CastMemberType.ACTOR),
    )
    fetched = await container.execute(GetCastMemberUseCase, GetCastMemberInput(id=created.id))

    assert fetched == updated
    assert (fetched.name, fetched.type) == ("John", CastMemberType.ACTOR)

    await container.execute(DeleteCastMemberUseCase, DeleteCastMemberInput(id=created.id))
    with pytest.raises(NotFoundError, match="CastMember Not Found"):
        await container.execute(GetCastMemberUseCase, GetCastMemberInput(id=created.id))


@pytest.mark.asyncio
async def test_create_with_blank_name_fails(container: Container) -> None:
    with pytest.raises(EntityValidationError):
        await container.execute(
            CreateCastMemberUseCase,
            CreateCastMemberInput(name=" ", type=CastMemberType.ACTOR),
        )
    assert await container.cast_member_repository.find_all() == []


@pytest.mark.asyncio
async def test_filter_by_name_and_type(container: Container, cast_member_builder: type) -> None:
    await container.cast_member_repository.bulk_insert(
        [
            cast_member_builder(name="John Director", type=CastMemberType.DIRECTOR).build(),
            cast_member_builder(name="John Actor", type=CastMemberType.ACTOR).build(),
            cast_member_builder(name="Mary Actor", type=CastMemberType.ACTOR).build(),
        ]
    )

    actors = await container.execute(
        ListCastMembersUseCase,
        ListCastMembersInput(filter={"type": CastMemberType.ACTOR}, sort="name"),
    )
    johns = await container.execute(
        ListCastMembersUseCase,
        ListCastMembersInput(filter={"name": "JOHN"}, sort="name", sort_dir="desc"),
    )
    john_actor = await container.execute(
        ListCastMembersUseCase,
        ListCastMembersInput(filter={"name": "john", "type": CastMemberType.ACTOR}),
    )

    assert [c.name for c in actors.items] == ["John Actor", "Mary Actor"]
    assert [c.name for c in johns.items] == ["John Director", "John Actor"]
    assert [c.name for c in john_actor.items] == ["John Actor"]


@pytest.mark.asyncio
async def test_exists_by_id_is_idempotent(
    container: Container, cast_member_builder: type
) -> None:
    stored = cast_member_builder().build()
    await container.cast_member_repository.insert(stored)
    ids = [stored.id, CastMemberId()]

    first = await container.cast_member_repository.exists_by_id(ids)
    second = await container.cast_member_repository.exists_by_id(ids)

    assert first == second
    assert first.exists == [stored.id]
