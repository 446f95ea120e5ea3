"""API routes package"""

from . import health, users, recipes, saved_recipes, calendar, planner, catalog, orders

__all__ = [
    "health",
    "users",
    "recipes",
    "saved_recipes",
    "calendar",
    "planner",
    "catalog",
    "orders",
]
