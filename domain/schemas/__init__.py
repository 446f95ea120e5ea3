"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import RegisterRequest, LoginRequest, AuthResponse
from domain.schemas.recipe_schemas import (
    IngredientEntry,
    RecipeCreate,
    RecipeResponse,
    RecipeCreateResponse,
    SaveRecipeRequest,
    MessageResponse,
)
from domain.schemas.calendar_schemas import (
    CalendarEntryUpsert,
    CalendarEntryResponse,
    RecipeSummary,
    DayPlan,
    WeekPlanResponse,
    RecipeMergeRequest,
    MergedRecipe,
)
from domain.schemas.catalog_schemas import (
    CatalogItemResponse,
    VideoResponse,
    CheckoutLine,
    CheckoutRequest,
    CartLineResponse,
    CheckoutResponse,
)

__all__ = [
    # User schemas
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    # Recipe schemas
    "IngredientEntry",
    "RecipeCreate",
    "RecipeResponse",
    "RecipeCreateResponse",
    "SaveRecipeRequest",
    "MessageResponse",
    # Planner schemas
    "CalendarEntryUpsert",
    "CalendarEntryResponse",
    "RecipeSummary",
    "DayPlan",
    "WeekPlanResponse",
    "RecipeMergeRequest",
    "MergedRecipe",
    # Catalog schemas
    "CatalogItemResponse",
    "VideoResponse",
    "CheckoutLine",
    "CheckoutRequest",
    "CartLineResponse",
    "CheckoutResponse",
]
