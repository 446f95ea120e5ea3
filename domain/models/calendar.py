"""
Meal planner calendar model.
"""

from sqlalchemy import (
    Column,
    Date,
    TIMESTAMP,
    ForeignKey,
    UniqueConstraint,
    Uuid,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import MealSlot


class CalendarEntry(Base):
    """One recipe assigned to a (owner, day, meal) slot"""

    __tablename__ = "calendar_entry"

    entry_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    date_saved = Column(Date, nullable=False)
    meal = Column(
        SQLEnum(
            MealSlot,
            name="meal_slot",
            values_callable=lambda slots: [s.value for s in slots],
        ),
        nullable=False,
    )
    recipe_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("recipe.recipe_id", ondelete="SET NULL"),
        nullable=True,
    )
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    owner = relationship("AppUser", back_populates="calendar_entries")
    recipe = relationship("Recipe")

    __table_args__ = (
        UniqueConstraint(
            "owner_id", "date_saved", "meal", name="uq_calendar_owner_date_meal"
        ),
    )
