"""Mock checkout route"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.catalog_schemas import CheckoutRequest, CheckoutResponse
from services.cart_service import CheckoutService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("/checkout", response_model=CheckoutResponse)
def checkout(body: CheckoutRequest, db: Session = Depends(get_db)):
    """Price the submitted cart and return an order confirmation. Nothing is stored."""
    return CheckoutService.checkout(db, body.items, email=body.email)
