from .domain import Genre, GenreCreated, GenreDeleted, GenreId, GenreUpdated
from .repository import GenreFilter, GenreSearchParams, IGenreRepository

__all__ = [
    "Genre",
    "GenreCreated",
    "GenreDeleted",
    "GenreFilter",
    "GenreId",
    "GenreSearchParams",
    "GenreUpdated",
    "IGenreRepository",
]
