"""
Cart schemas
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from storefront.schemas.product import ProductResponse


class CartItemCreate(BaseModel):
    product_id: int
    quantity: int = 1
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None


class CartItemUpdate(BaseModel):
    quantity: int


class CartItemResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    product_id: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CartLineResponse(CartItemResponse):
    product: ProductResponse


class CartResponse(BaseModel):
    items: List[CartLineResponse]
    subtotal: float
    item_count: int

    class Config:
        from_attributes = True
