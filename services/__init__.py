"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.recipe_service import RecipeService
from services.calendar_service import CalendarService
from services.planner_service import PlannerService
from services.catalog_service import CatalogService
from services.cart_service import Cart, CheckoutService

__all__ = [
    "AuthService",
    "RecipeService",
    "CalendarService",
    "PlannerService",
    "CatalogService",
    "Cart",
    "CheckoutService",
]
