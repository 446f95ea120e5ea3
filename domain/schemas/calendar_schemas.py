from datetime import date, datetime
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from domain.enums import MealSlot


class CalendarEntryUpsert(BaseModel):
    owner_id: UUID
    date_saved: date
    meal: MealSlot
    recipe_id: Optional[UUID] = None


class CalendarEntryResponse(BaseModel):
    entry_id: UUID
    owner_id: UUID
    date_saved: date
    meal: MealSlot
    recipe_id: Optional[UUID] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RecipeSummary(BaseModel):
    recipe_id: UUID
    name: str
    image: Optional[str] = None


class DayPlan(BaseModel):
    date: date
    weekday: str
    breakfast: Optional[RecipeSummary] = None
    lunch: Optional[RecipeSummary] = None
    dinner: Optional[RecipeSummary] = None


class WeekPlanResponse(BaseModel):
    owner_id: UUID
    week_start: date
    week_end: date
    days: List[DayPlan]
    planned_meals: int = Field(..., description="Filled slots in this week")


class RecipeMergeRequest(BaseModel):
    owner_id: Optional[UUID] = None
    local_recipes: List[dict] = Field(default_factory=list)


class MergedRecipe(BaseModel):
    id: str
    title: str
    description: str = ""
    instructions: Union[str, list] = ""
    ingredients: list = Field(default_factory=list)
    image: Optional[str] = None
    created: Optional[str] = None
    favorite: bool = False
    planned: bool = False
    synced: bool
