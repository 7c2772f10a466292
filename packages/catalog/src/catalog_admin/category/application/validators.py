from __future__ import annotations

from catalog_core.application.validators import IdsExistsInDatabaseValidator

from ..domain import Category, CategoryId


class CategoriesIdExistsInDatabaseValidator(IdsExistsInDatabaseValidator[CategoryId]):
    id_type = CategoryId
    entity_type = Category
