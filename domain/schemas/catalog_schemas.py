from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


class CatalogItemResponse(BaseModel):
    item_id: int
    name: str
    price: str
    url: Optional[str] = None
    quantity: Optional[str] = None
    category: Optional[str] = None
    img: Optional[str] = None
    rating: Optional[float] = None
    reviews: Optional[int] = None
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class VideoResponse(BaseModel):
    video_id: int
    title: str
    length: Optional[str] = None
    url: str
    category: Optional[str] = None

    model_config = {"from_attributes": True}


class CheckoutLine(BaseModel):
    item_id: int
    quantity: int = Field(default=1, ge=1, le=99)


class CheckoutRequest(BaseModel):
    items: List[CheckoutLine] = Field(default_factory=list)
    email: Optional[EmailStr] = None


class CartLineResponse(BaseModel):
    item_id: int
    name: str
    price: str
    quantity: int
    line_total: Decimal


class CheckoutResponse(BaseModel):
    order_number: str
    items: List[CartLineResponse]
    item_count: int
    total: Decimal
    message: str
