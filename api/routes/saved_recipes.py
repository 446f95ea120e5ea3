"""Saved (bookmarked) recipe routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.dependencies import get_db
from domain.mappers import RecipeMapper
from domain.schemas.recipe_schemas import (
    MessageResponse,
    RecipeResponse,
    SaveRecipeRequest,
)
from services.recipe_service import RecipeService

router = APIRouter(prefix="/saveRecipe", tags=["Saved Recipes"])


@router.post("", response_model=MessageResponse)
def save_recipe(body: SaveRecipeRequest, db: Session = Depends(get_db)):
    RecipeService.save_for_user(db, body.user_id, body.recipe_id)
    return MessageResponse(message="Recipe saved successfully")


@router.get("", response_model=List[RecipeResponse])
def list_saved_recipes(
    user_id: UUID = Query(..., alias="userId"), db: Session = Depends(get_db)
):
    """Saved recipes of a user with their ingredients; 404 when there are none."""
    return [RecipeMapper.to_response(r) for r in RecipeService.saved_recipes(db, user_id)]
