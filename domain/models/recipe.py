"""
Recipe-related models: recipes, their ingredient links and user bookmarks.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Boolean,
    Integer,
    LargeBinary,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Recipe(Base):
    """User submitted recipe"""

    __tablename__ = "recipe"

    recipe_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text)
    instructions = Column(Text)
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_public = Column(Boolean, nullable=False, default=True)
    image = Column(LargeBinary, nullable=True)
    image_content_type = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    owner = relationship("AppUser", back_populates="recipes")
    ingredient_links = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )


class RecipeIngredient(Base):
    """Join row between a recipe and an ingredient with its quantity"""

    __tablename__ = "recipe_ingredient"

    recipe_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        primary_key=True,
    )
    ingredient_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("ingredient.ingredient_id"),
        primary_key=True,
    )
    quantity = Column(Text)
    unit = Column(Text)
    position = Column(Integer, nullable=False, default=0)

    recipe = relationship("Recipe", back_populates="ingredient_links")
    ingredient = relationship("Ingredient", lazy="joined")


class SavedRecipe(Base):
    """A recipe bookmarked by a user"""

    __tablename__ = "saved_recipe"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        primary_key=True,
    )
    recipe_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        primary_key=True,
    )
    saved_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="saved_recipes")
    recipe = relationship("Recipe")
