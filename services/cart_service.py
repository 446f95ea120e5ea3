"""Shopping cart and mock checkout.

The cart is never persisted: it exists for the lifetime of one checkout
request (or one client session when used in-process).
"""

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import CatalogItem
from domain.schemas.catalog_schemas import (
    CartLineResponse,
    CheckoutLine,
    CheckoutResponse,
)
from repositories import CatalogItemRepository
from services.catalog_service import parse_price

logger = logging.getLogger("chefexpress.cart")

CENTS = Decimal("0.01")


@dataclass
class CartItem:
    item_id: int
    name: str
    price: str
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return (parse_price(self.price) * self.quantity).quantize(CENTS, ROUND_HALF_UP)


@dataclass
class Cart:
    """In-memory cart keyed by catalog item id, kept in insertion order."""

    items: Dict[int, CartItem] = field(default_factory=dict)

    def add(self, product: CatalogItem, quantity: int = 1) -> CartItem:
        """Add a product, or raise its quantity if it is already in the cart."""
        existing = self.items.get(product.item_id)
        if existing:
            existing.quantity += quantity
            return existing
        item = CartItem(
            item_id=product.item_id,
            name=product.name,
            price=product.price,
            quantity=quantity,
        )
        self.items[product.item_id] = item
        return item

    def remove(self, item_id: int) -> bool:
        return self.items.pop(item_id, None) is not None

    def update_quantity(self, item_id: int, quantity: int) -> None:
        """Set a quantity; anything below one removes the item."""
        if quantity < 1:
            self.remove(item_id)
            return
        if item_id in self.items:
            self.items[item_id].quantity = quantity

    def clear(self) -> None:
        self.items.clear()

    def lines(self) -> List[CartItem]:
        return list(self.items.values())

    def count(self) -> int:
        return sum(i.quantity for i in self.items.values())

    def total(self) -> Decimal:
        return sum((i.line_total for i in self.items.values()), Decimal("0.00")).quantize(
            CENTS, ROUND_HALF_UP
        )


class CheckoutService:
    @staticmethod
    def build_cart(db: Session, lines: List[CheckoutLine]) -> Cart:
        products = {
            p.item_id: p
            for p in CatalogItemRepository(db).get_many(l.item_id for l in lines)
        }
        missing = sorted({l.item_id for l in lines} - products.keys())
        if missing:
            raise NotFoundError("Unknown catalog items", details={"item_ids": missing})

        cart = Cart()
        for line in lines:
            cart.add(products[line.item_id], line.quantity)
        return cart

    @staticmethod
    def checkout(
        db: Session, lines: List[CheckoutLine], email: Optional[str] = None
    ) -> CheckoutResponse:
        """Price a cart and hand back a mock order confirmation; nothing is stored."""
        if not lines:
            raise ServiceValidationError("Cart is empty")

        cart = CheckoutService.build_cart(db, lines)
        order_number = f"CE-{uuid.uuid4().hex[:10].upper()}"
        total = cart.total()
        logger.info(
            f"checkout_completed order_number={order_number} "
            f"items={cart.count()} total={total} email={email}"
        )
        return CheckoutResponse(
            order_number=order_number,
            items=[
                CartLineResponse(
                    item_id=i.item_id,
                    name=i.name,
                    price=i.price,
                    quantity=i.quantity,
                    line_total=i.line_total,
                )
                for i in cart.lines()
            ],
            item_count=cart.count(),
            total=total,
            message="Order placed successfully",
        )
