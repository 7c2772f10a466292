from .outputs import GenreCategoryOutput, GenreOutput
from .use_cases import (
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
from .validators import GenresIdExistsInDatabaseValidator

__all__ = [
    "CreateGenreInput",
    "CreateGenreUseCase",
    "DeleteGenreInput",
    "DeleteGenreUseCase",
    "GenreCategoryOutput",
    "GenreOutput",
    "GenresIdExistsInDatabaseValidator",
    "GetGenreInput",
    "GetGenreUseCase",
    "ListGenresInput",
    "ListGenresUseCase",
    "UpdateGenreInput",
    "UpdateGenreUseCase",
]
