"""
Domain mappers package.
Mappers convert between ORM models and response DTOs.
"""

from domain.mappers.recipe_mapper import RecipeMapper, image_data_uri

__all__ = ["RecipeMapper", "image_data_uri"]
