"""
Domain enums for ChefExpress application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealSlot(str, enum.Enum):
    """Meal slots of a planner day, in display order"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def ordered(cls) -> list["MealSlot"]:
        return [cls.BREAKFAST, cls.LUNCH, cls.DINNER]

    @property
    def position(self) -> int:
        return MealSlot.ordered().index(self)


class CatalogSort(str, enum.Enum):
    """Sort orders offered by the shop catalog"""

    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING = "rating"
