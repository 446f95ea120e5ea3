"""
Ingredient model - Master ingredient table.
Ingredients are shared across recipes and de-duplicated by normalised name.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, UniqueConstraint
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Ingredient(Base):
    """Master ingredient table - single source of truth for ingredient names."""

    __tablename__ = "ingredient"

    ingredient_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (UniqueConstraint("name", name="uq_ingredient_name"),)

    def __repr__(self):
        return f"<Ingredient(id={self.ingredient_id}, name='{self.name}')>"
