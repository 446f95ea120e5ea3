"""
User account model.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """User account model"""

    __tablename__ = "app_user"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    pass_hash = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    recipes = relationship("Recipe", back_populates="owner")
    saved_recipes = relationship(
        "SavedRecipe", back_populates="user", cascade="all, delete-orphan"
    )
    calendar_entries = relationship(
        "CalendarEntry", back_populates="owner", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<AppUser(id={self.user_id}, email='{self.email}')>"
