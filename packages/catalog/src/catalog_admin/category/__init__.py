from .domain import Category, CategoryId
from .repository import CategoryFilter, CategorySearchParams, ICategoryRepository

__all__ = [
    "Category",
    "CategoryFilter",
    "CategoryId",
    "CategorySearchParams",
    "ICategoryRepository",
]
