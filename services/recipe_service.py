"""Recipe creation, listing and bookmarks"""

import json
import logging
from typing import List, Optional, Tuple
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import Recipe, SavedRecipe
from domain.schemas.recipe_schemas import IngredientEntry, RecipeCreate
from repositories import (
    IngredientRepository,
    RecipeRepository,
    SavedRecipeRepository,
    UserRepository,
)
from repositories.ingredient_repository import normalize_ingredient_name

logger = logging.getLogger("chefexpress.recipes")


def parse_ingredients(raw: Optional[str]) -> List[IngredientEntry]:
    """Parse the JSON ingredient list sent as a multipart form field."""
    if raw is None or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ServiceValidationError(
            "ingredients must be a JSON array", details={"error": str(e)}
        )
    if not isinstance(data, list):
        raise ServiceValidationError("ingredients must be a JSON array")
    try:
        return [IngredientEntry.model_validate(item) for item in data]
    except ValidationError as e:
        raise ServiceValidationError(
            "Invalid ingredient entry",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )


def check_image(data: Optional[bytes], content_type: Optional[str]) -> None:
    if data is None:
        return
    if not data:
        raise ServiceValidationError("Uploaded image is empty")
    if len(data) > settings.max_image_bytes:
        raise ServiceValidationError(
            "Image is too large",
            details={"max_bytes": settings.max_image_bytes, "size": len(data)},
        )
    if content_type and not content_type.startswith("image/"):
        raise ServiceValidationError(f"Unsupported image type: {content_type}")


class RecipeService:
    """Business logic for the recipe collection."""

    @staticmethod
    def create_recipe(
        db: Session,
        data: RecipeCreate,
        image: Optional[bytes] = None,
        image_content_type: Optional[str] = None,
    ) -> Tuple[Recipe, int]:
        """
        Create a recipe with its ingredients in a single transaction.

        Ingredients are find-or-created by normalised name and linked with
        their quantity. Either the recipe and every link are committed, or
        nothing is.

        Returns:
            (recipe, number of ingredients that were newly created)
        """
        check_image(image, image_content_type)

        names = [normalize_ingredient_name(i.name) for i in data.ingredients]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ServiceValidationError(
                "Ingredient listed more than once", details={"duplicates": duplicates}
            )

        if data.owner_id is not None and not UserRepository(db).exists(data.owner_id):
            raise ServiceValidationError(f"Unknown owner: {data.owner_id}")

        recipe_repo = RecipeRepository(db)
        ingredient_repo = IngredientRepository(db)
        created_count = 0
        try:
            recipe = recipe_repo.add(
                Recipe(
                    name=data.title,
                    description=data.description,
                    instructions=data.instructions,
                    owner_id=data.owner_id,
                    is_public=data.is_public,
                    image=image,
                    image_content_type=image_content_type if image else None,
                )
            )
            for position, entry in enumerate(data.ingredients):
                ingredient, created = ingredient_repo.find_or_create(entry.name)
                created_count += int(created)
                recipe_repo.add_ingredient_link(
                    recipe.recipe_id,
                    ingredient.ingredient_id,
                    entry.quantity,
                    entry.unit,
                    position,
                )
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"recipe_create_failed title={data.title!r} error={e}")
            raise ServiceValidationError("Database integrity error while creating recipe")
        except Exception:
            db.rollback()
            logger.exception(f"recipe_create_failed title={data.title!r}")
            raise

        db.refresh(recipe)
        logger.info(
            f"recipe_created recipe_id={recipe.recipe_id} owner_id={recipe.owner_id} "
            f"ingredients={len(data.ingredients)} new_ingredients={created_count}"
        )
        return recipe, created_count

    @staticmethod
    def list_recipes(
        db: Session, owner_id: Optional[UUID] = None, is_public: Optional[bool] = None
    ) -> List[Recipe]:
        recipes = RecipeRepository(db).list_recipes(owner_id=owner_id, is_public=is_public)
        logger.info(f"recipes_listed owner_id={owner_id} count={len(recipes)}")
        return recipes

    @staticmethod
    def get_recipe(db: Session, recipe_id: UUID) -> Recipe:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        return recipe

    @staticmethod
    def attach_image(
        db: Session, recipe_id: UUID, image: bytes, content_type: Optional[str]
    ) -> Recipe:
        """Replace the image of an existing recipe"""
        check_image(image, content_type)
        recipe = RecipeService.get_recipe(db, recipe_id)
        recipe.image = image
        recipe.image_content_type = content_type
        db.commit()
        db.refresh(recipe)
        logger.info(f"recipe_image_updated recipe_id={recipe_id} bytes={len(image)}")
        return recipe

    @staticmethod
    def save_for_user(db: Session, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        """Bookmark a recipe for a user; saving twice is rejected"""
        if not UserRepository(db).exists(user_id):
            raise NotFoundError(f"User {user_id} not found")
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError(f"Recipe {recipe_id} not found")

        saved_repo = SavedRecipeRepository(db)
        if saved_repo.get(user_id, recipe_id):
            raise ServiceValidationError("Recipe already saved by this user")

        try:
            saved = saved_repo.create(SavedRecipe(user_id=user_id, recipe_id=recipe_id))
        except IntegrityError:
            db.rollback()
            raise ServiceValidationError("Recipe already saved by this user")
        logger.info(f"recipe_saved user_id={user_id} recipe_id={recipe_id}")
        return saved

    @staticmethod
    def saved_recipes(db: Session, user_id: UUID) -> List[Recipe]:
        saved = SavedRecipeRepository(db).list_for_user(user_id)
        if not saved:
            raise NotFoundError("No saved recipes found for this user.")
        return [s.recipe for s in saved]
