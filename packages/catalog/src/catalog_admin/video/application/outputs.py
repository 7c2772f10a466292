from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...cast_member.domain import CastMember, CastMemberType
    from ...category.domain import Category
    from ...genre.domain import Genre
    from ..domain import Rating, Video


@dataclass(frozen=True)
class VideoCategoryOutput:
    id: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class VideoGenreOutput:
    id: str
    name: str
    is_active: bool
    categories_id: list[str]
    categories: list[VideoCategoryOutput]
    created_at: datetime


@dataclass(frozen=True)
class VideoCastMemberOutput:
    id: str
    name: str
    type: CastMemberType
    created_at: datetime


@dataclass(frozen=True)
class VideoOutput:
    id: str
    title: str
    description: str
    released_year: int
    duration: int
    rating: Rating
    is_opened: bool
    is_published: bool
    categories_id: list[str]
    genres_id: list[str]
    cast_members_id: list[str]
    created_at: datetime
    categories: list[VideoCategoryOutput] = field(default_factory=list)
    genres: list[VideoGenreOutput] = field(default_factory=list)
    cast_members: list[VideoCastMemberOutput] = field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        video: Video,
        *,
        categories: Sequence[Category] = (),
        genres: Sequence[Genre] = (),
        cast_members: Sequence[CastMember] = (),
    ) -> VideoOutput:
        """Build the output.

        *categories* holds the categories of the video and of its genres;
        unrelated entries in any of the lists are ignored.
        """

        def category_output(category: Category) -> VideoCategoryOutput:
            return VideoCategoryOutput(
                id=str(category.id), name=category.name, created_at=category.created_at
            )

        return cls(
            id=str(video.id),
            title=video.title,
            description=video.description,
            released_year=video.released_year,
            duration=video.duration,
            rating=video.rating,
            is_opened=video.is_opened,
            is_published=video.is_published,
            categories_id=list(video.categories_id),
            genres_id=list(video.genres_id),
            cast_members_id=list(video.cast_members_id),
            created_at=video.created_at,
            categories=[
                category_output(c) for c in categories if c.id.id in video.categories_id
            ],
            genres=[
                VideoGenreOutput(
                    id=str(g.id),
                    name=g.name,
                    is_active=g.is_active,
                    categories_id=list(g.categories_id),
                    categories=[
                        category_output(c)
                        for c in categories
                        if c.id.id in g.categories_id
                    ],
                    created_at=g.created_at,
                )
                for g in genres
                if g.id.id in video.genres_id
            ],
            cast_members=[
                VideoCastMemberOutput(
                    id=str(c.id), name=c.name, type=c.type, created_at=c.created_at
                )
                for c in cast_members
                if c.id.id in video.cast_members_id
            ],
        )


@dataclass(frozen=True)
class CreateVideoOutput:
    id: str


@dataclass(frozen=True)
class UpdateVideoOutput:
    id: str
