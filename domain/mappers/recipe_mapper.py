"""
Recipe domain mappers.
Handles transformation between ORM models and DTOs for recipe-related entities.
"""

import base64
from typing import Optional

from domain.models import Recipe
from domain.schemas.recipe_schemas import IngredientEntry, RecipeResponse
from domain.schemas.calendar_schemas import RecipeSummary

DEFAULT_IMAGE_TYPE = "image/jpeg"


def image_data_uri(data: Optional[bytes], content_type: Optional[str] = None) -> Optional[str]:
    """Inline binary image data as a data: URI, or None when there is no image."""
    if not data:
        return None
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{content_type or DEFAULT_IMAGE_TYPE};base64,{encoded}"


class RecipeMapper:
    """Mapper for recipe-related transformations."""

    @staticmethod
    def to_response(recipe: Recipe) -> RecipeResponse:
        """
        Convert Recipe ORM model to RecipeResponse DTO.

        Args:
            recipe: Recipe ORM instance with ingredient links loaded

        Returns:
            RecipeResponse DTO with ingredients in submission order and the
            image inlined as base64
        """
        return RecipeResponse(
            recipe_id=recipe.recipe_id,
            name=recipe.name,
            description=recipe.description,
            instructions=recipe.instructions,
            owner_id=recipe.owner_id,
            is_public=bool(recipe.is_public),
            image=image_data_uri(recipe.image, recipe.image_content_type),
            created_at=recipe.created_at,
            ingredients=[
                IngredientEntry(
                    name=link.ingredient.name,
                    quantity=link.quantity,
                    unit=link.unit,
                )
                for link in recipe.ingredient_links
            ],
        )

    @staticmethod
    def to_summary(recipe: Recipe) -> RecipeSummary:
        return RecipeSummary(
            recipe_id=recipe.recipe_id,
            name=recipe.name,
            image=image_data_uri(recipe.image, recipe.image_content_type),
        )
