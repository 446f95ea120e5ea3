"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.ingredient import Ingredient
from domain.models.recipe import Recipe, RecipeIngredient, SavedRecipe
from domain.models.calendar import CalendarEntry
from domain.models.catalog import CatalogItem, Video

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # Recipe models
    "Ingredient",
    "Recipe",
    "RecipeIngredient",
    "SavedRecipe",
    # Planner models
    "CalendarEntry",
    # Catalog models
    "CatalogItem",
    "Video",
]
