"""
Recipe Repository - Data access for recipes, ingredient links and saved recipes
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Recipe, RecipeIngredient, SavedRecipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: UUID) -> Optional[Recipe]:
        """Get recipe by ID with its ingredient links loaded"""
        return (
            self.db.query(Recipe)
            .options(selectinload(Recipe.ingredient_links))
            .filter(Recipe.recipe_id == recipe_id)
            .first()
        )

    def list_recipes(
        self,
        owner_id: Optional[UUID] = None,
        is_public: Optional[bool] = None,
    ) -> List[Recipe]:
        """List recipes, newest first, optionally filtered by owner and visibility"""
        query = self.db.query(Recipe).options(selectinload(Recipe.ingredient_links))
        if owner_id is not None:
            query = query.filter(Recipe.owner_id == owner_id)
        if is_public is not None:
            query = query.filter(Recipe.is_public == is_public)
        return query.order_by(Recipe.created_at.desc(), Recipe.name).all()

    def add_ingredient_link(
        self,
        recipe_id: UUID,
        ingredient_id: UUID,
        quantity: Optional[str],
        unit: Optional[str],
        position: int,
    ) -> RecipeIngredient:
        """Stage one recipe/ingredient link (flush only)"""
        link = RecipeIngredient(
            recipe_id=recipe_id,
            ingredient_id=ingredient_id,
            quantity=quantity,
            unit=unit,
            position=position,
        )
        self.db.add(link)
        self.db.flush()
        return link

    def count_links(self, recipe_id: Optional[UUID] = None) -> int:
        query = self.db.query(RecipeIngredient)
        if recipe_id is not None:
            query = query.filter(RecipeIngredient.recipe_id == recipe_id)
        return query.count()


class SavedRecipeRepository(BaseRepository[SavedRecipe]):
    """Repository for user bookmarks"""

    def __init__(self, db: Session):
        super().__init__(db, SavedRecipe)

    def get(self, user_id: UUID, recipe_id: UUID) -> Optional[SavedRecipe]:
        return self.db.get(SavedRecipe, (user_id, recipe_id))

    def list_for_user(self, user_id: UUID) -> List[SavedRecipe]:
        return (
            self.db.query(SavedRecipe)
            .filter(SavedRecipe.user_id == user_id)
            .order_by(SavedRecipe.saved_at)
            .all()
        )
