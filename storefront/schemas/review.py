"""
Review schemas
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    user_id: int
    product_id: int
    order_id: Optional[int] = None
    # Range is checked by the service so direct callers get InvalidRequestError too.
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    images: List[str] = []
    is_verified: bool = False


class ReviewHelpful(BaseModel):
    helpful: bool


class ReviewResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    order_id: Optional[int] = None
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = None
    comment: Optional[str] = None
    images: Optional[List[str]] = None
    is_verified: bool
    helpful_count: int
    created_at: datetime

    class Config:
        from_attributes = True
