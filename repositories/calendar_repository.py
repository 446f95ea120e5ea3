"""
Calendar Repository - meal planner entries keyed by (owner, date, meal)
"""

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.enums import MealSlot
from domain.models import CalendarEntry


class CalendarRepository(BaseRepository[CalendarEntry]):
    """Repository for calendar entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, CalendarEntry)

    def get_by_key(
        self, owner_id: UUID, date_saved: date, meal: MealSlot
    ) -> Optional[CalendarEntry]:
        """Get the entry stored under its natural key"""
        return (
            self.db.query(CalendarEntry)
            .filter(
                CalendarEntry.owner_id == owner_id,
                CalendarEntry.date_saved == date_saved,
                CalendarEntry.meal == meal,
            )
            .first()
        )

    def list_entries(
        self,
        owner_id: Optional[UUID] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[CalendarEntry]:
        query = self.db.query(CalendarEntry).options(selectinload(CalendarEntry.recipe))
        if owner_id is not None:
            query = query.filter(CalendarEntry.owner_id == owner_id)
        if start is not None:
            query = query.filter(CalendarEntry.date_saved >= start)
        if end is not None:
            query = query.filter(CalendarEntry.date_saved <= end)
        entries = query.all()
        return sorted(entries, key=lambda e: (e.date_saved, e.meal.position))

    def upsert(
        self,
        owner_id: UUID,
        date_saved: date,
        meal: MealSlot,
        recipe_id: Optional[UUID],
    ) -> Tuple[CalendarEntry, bool]:
        """
        Create the entry or replace the recipe of the existing one.

        Returns:
            (entry, created)
        """
        entry = self.get_by_key(owner_id, date_saved, meal)
        if entry:
            entry.recipe_id = recipe_id
            self.db.flush()
            return entry, False
        entry = CalendarEntry(
            owner_id=owner_id, date_saved=date_saved, meal=meal, recipe_id=recipe_id
        )
        self.add(entry)
        return entry, True

    def delete_by_key(self, owner_id: UUID, date_saved: date, meal: MealSlot) -> int:
        """Delete the entry for one natural key; returns the number of rows removed"""
        count = (
            self.db.query(CalendarEntry)
            .filter(
                CalendarEntry.owner_id == owner_id,
                CalendarEntry.date_saved == date_saved,
                CalendarEntry.meal == meal,
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
