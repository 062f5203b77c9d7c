"""
Wishlist schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from storefront.schemas.product import ProductResponse


class WishlistItemCreate(BaseModel):
    user_id: Optional[int] = None  # required; checked by the service
    product_id: int


class WishlistItemResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class WishlistLineResponse(WishlistItemResponse):
    product: ProductResponse
