"""Meal planner calendar service"""

import logging
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from domain.enums import MealSlot
from domain.models import CalendarEntry
from repositories import CalendarRepository, RecipeRepository, UserRepository

logger = logging.getLogger("chefexpress.calendar")


class CalendarService:
    """Business logic for calendar entries.

    An (owner, date, meal) key holds at most one recipe; writing to an
    occupied key replaces the recipe in place.
    """

    @staticmethod
    def list_entries(
        db: Session,
        owner_id: Optional[UUID] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[CalendarEntry]:
        if start and end and start > end:
            raise ServiceValidationError("start must not be after end")
        entries = CalendarRepository(db).list_entries(owner_id, start, end)
        logger.info(f"calendar_listed owner_id={owner_id} count={len(entries)}")
        return entries

    @staticmethod
    def upsert_entry(
        db: Session,
        owner_id: UUID,
        date_saved: date,
        meal: MealSlot,
        recipe_id: Optional[UUID] = None,
    ) -> Tuple[CalendarEntry, bool]:
        """
        Create or update the entry for (owner_id, date_saved, meal).

        Returns:
            (entry, created_flag)
        """
        if not UserRepository(db).exists(owner_id):
            raise NotFoundError(f"User {owner_id} not found")
        if recipe_id is not None and not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError(f"Recipe {recipe_id} not found")

        try:
            entry, created = CalendarRepository(db).upsert(
                owner_id, date_saved, meal, recipe_id
            )
            db.commit()
        except IntegrityError as e:
            # a concurrent request claimed the same key first
            db.rollback()
            logger.error(
                f"calendar_upsert_conflict owner_id={owner_id} date={date_saved} "
                f"meal={meal.value} error={e}"
            )
            raise ConflictError("Calendar slot was modified concurrently, retry")

        db.refresh(entry)
        logger.info(
            f"calendar_upserted owner_id={owner_id} date={date_saved} "
            f"meal={meal.value} recipe_id={recipe_id} created={created}"
        )
        return entry, created

    @staticmethod
    def delete_entry(db: Session, owner_id: UUID, date_saved: date, meal: MealSlot) -> None:
        removed = CalendarRepository(db).delete_by_key(owner_id, date_saved, meal)
        if not removed:
            raise NotFoundError(
                f"No calendar entry for {owner_id} on {date_saved} ({meal.value})"
            )
        logger.info(
            f"calendar_deleted owner_id={owner_id} date={date_saved} meal={meal.value}"
        )
