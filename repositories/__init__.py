"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.recipe_repository import RecipeRepository, SavedRecipeRepository
from repositories.calendar_repository import CalendarRepository
from repositories.catalog_repository import CatalogItemRepository, VideoRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "IngredientRepository",
    "RecipeRepository",
    "SavedRecipeRepository",
    "CalendarRepository",
    "CatalogItemRepository",
    "VideoRepository",
]
