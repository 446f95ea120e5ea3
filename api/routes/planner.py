"""Weekly planner routes"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.calendar_schemas import (
    MergedRecipe,
    RecipeMergeRequest,
    WeekPlanResponse,
)
from services.planner_service import PlannerService

router = APIRouter(prefix="/planner", tags=["Meal Planning"])


@router.get("/week", response_model=WeekPlanResponse)
def get_week(
    owner_id: UUID = Query(...),
    anchor: Optional[date] = Query(default=None, description="Any day of the week, defaults to today"),
    offset: int = Query(default=0, ge=-520, le=520, description="Weeks to move (-1 previous, 1 next)"),
    db: Session = Depends(get_db),
):
    """Seven days (Sunday first) with breakfast, lunch and dinner slots."""
    return PlannerService.build_week(db, owner_id, anchor=anchor, offset=offset)


@router.post("/recipes", response_model=List[MergedRecipe])
def merge_recipes(body: RecipeMergeRequest, db: Session = Depends(get_db)):
    """Merge the client's cached recipes with the ones stored on the server."""
    return PlannerService.merge_recipes(db, body.owner_id, body.local_recipes)
