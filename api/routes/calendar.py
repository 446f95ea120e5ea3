"""Meal planner calendar routes"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.enums import MealSlot
from domain.schemas.calendar_schemas import CalendarEntryResponse, CalendarEntryUpsert
from services.calendar_service import CalendarService

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get("", response_model=List[CalendarEntryResponse])
def list_calendar_entries(
    owner_id: Optional[UUID] = Query(default=None),
    start: Optional[date] = Query(default=None, description="First day (inclusive)"),
    end: Optional[date] = Query(default=None, description="Last day (inclusive)"),
    db: Session = Depends(get_db),
):
    return CalendarService.list_entries(db, owner_id=owner_id, start=start, end=end)


@router.post(
    "",
    response_model=CalendarEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"description": "Existing slot updated"}},
)
def upsert_calendar_entry(
    body: CalendarEntryUpsert, response: Response, db: Session = Depends(get_db)
):
    """
    Assign a recipe to a meal slot.

    Returns 201 when the slot was empty and 200 when an existing assignment
    was replaced.
    """
    entry, created = CalendarService.upsert_entry(
        db, body.owner_id, body.date_saved, body.meal, body.recipe_id
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return entry


@router.delete("/{owner_id}/{date_saved}/{meal}", response_model=DeletedResponse)
def delete_calendar_entry(
    owner_id: UUID, date_saved: date, meal: MealSlot, db: Session = Depends(get_db)
):
    CalendarService.delete_entry(db, owner_id, date_saved, meal)
    return DeletedResponse(
        deleted={
            "owner_id": str(owner_id),
            "date_saved": date_saved.isoformat(),
            "meal": meal.value,
        }
    )
