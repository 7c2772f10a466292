from __future__ import annotations

from catalog_core.application.validators import IdsExistsInDatabaseValidator

from ..domain import Genre, GenreId


class GenresIdExistsInDatabaseValidator(IdsExistsInDatabaseValidator[GenreId]):
    id_type = GenreId
    entity_type = Genre
