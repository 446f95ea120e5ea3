"""
Ingredient Repository - find-or-create access to the master ingredient table
"""

import re
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Ingredient

_WHITESPACE = re.compile(r"\s+")


def normalize_ingredient_name(name: str) -> str:
    """Canonical form used for de-duplication: trimmed, single-spaced, lower-case."""
    return _WHITESPACE.sub(" ", name).strip().lower()


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient data access"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_by_name(self, name: str) -> Optional[Ingredient]:
        return (
            self.db.query(Ingredient)
            .filter(Ingredient.name == normalize_ingredient_name(name))
            .first()
        )

    def find_or_create(self, name: str) -> Tuple[Ingredient, bool]:
        """
        Return the ingredient with this name, creating it when missing.

        Only flushes; the caller owns the transaction.

        Returns:
            (ingredient, created)
        """
        existing = self.get_by_name(name)
        if existing:
            return existing, False
        ingredient = Ingredient(name=normalize_ingredient_name(name))
        self.add(ingredient)
        return ingredient, True
