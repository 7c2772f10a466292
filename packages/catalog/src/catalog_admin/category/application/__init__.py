from .outputs import CategoryOutput
from .use_cases import (
    CreateCategoryInput,
    CreateCategoryUseCase,
    DeleteCategoryInput,
    DeleteCategoryUseCase,
    GetCategoryInput,
    GetCategoryUseCase,
    ListCategoriesInput,
    ListCategoriesUseCase,
    UpdateCategoryInput,
    UpdateCategoryUseCase,
)
from .validators import CategoriesIdExistsInDatabaseValidator

__all__ = [
    "CategoriesIdExistsInDatabaseValidator",
    "CategoryOutput",
    "CreateCategoryInput",
    "CreateCategoryUseCase",
    "DeleteCategoryInput",
    "DeleteCategoryUseCase",
    "GetCategoryInput",
    "GetCategoryUseCase",
    "ListCategoriesInput",
    "ListCategoriesUseCase",
    "UpdateCategoryInput",
    "UpdateCategoryUseCase",
]
