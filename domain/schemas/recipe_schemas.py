"""
Recipe schemas - Pydantic models for recipe upload, listing and bookmarks.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class IngredientEntry(BaseModel):
    """Ingredient line as submitted by the recipe form"""

    name: str = Field(..., min_length=1, max_length=200)
    quantity: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("quantity", "unit", mode="before")
    def stringify(cls, v):
        # the client sends quantities typed as numbers or strings
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("name")
    def require_visible_name(cls, v):
        if not v.strip():
            raise ValueError("ingredient name must not be blank")
        return v


class RecipeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    instructions: Optional[str] = None
    ingredients: List[IngredientEntry] = Field(default_factory=list)
    owner_id: Optional[UUID] = None
    is_public: bool = True

    @field_validator("title")
    def strip_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class RecipeResponse(BaseModel):
    recipe_id: UUID
    name: str
    description: Optional[str] = None
    instructions: Optional[str] = None
    owner_id: Optional[UUID] = None
    is_public: bool = True
    image: Optional[str] = Field(None, description="data: URI of the recipe image")
    created_at: Optional[datetime] = None
    ingredients: List[IngredientEntry] = Field(default_factory=list)


class RecipeCreateResponse(BaseModel):
    message: str
    recipe: RecipeResponse
    new_ingredient_count: int = Field(
        ..., description="Ingredients that did not exist before this recipe"
    )


class SaveRecipeRequest(BaseModel):
    user_id: UUID
    recipe_id: UUID


class MessageResponse(BaseModel):
    message: str
