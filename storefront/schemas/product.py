"""
Product schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.category import CategoryResponse
from storefront.schemas.review import ReviewResponse


class ProductFilters(BaseModel):
    """
    Every option the product listing understands.

    Unknown keys are rejected instead of silently ignored. Each default is a
    no-op: None/False leave the result unfiltered, offset 0 skips nothing and
    limit None returns everything.
    """
    model_config = ConfigDict(extra="forbid")

    category_id: Optional[int] = None
    is_new: bool = False
    is_trending: bool = False
    is_featured: bool = False
    is_deal: bool = False
    search: Optional[str] = None
    limit: Optional[int] = None
    offset: int = 0


class ProductBase(BaseModel):
    name: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    images: List[str] = []
    sizes: List[str] = []
    colors: List[str] = []
    is_new: bool = False
    is_trending: bool = False
    is_featured: bool = False
    is_deal: bool = False
    is_active: bool = True
    tags: List[str] = []
    material_info: Optional[str] = None
    care_instructions: Optional[str] = None


class ProductCreate(ProductBase):
    slug: Optional[str] = None  # generated from name when omitted
    price: Decimal = Field(..., ge=0)
    compare_at_price: Optional[Decimal] = Field(None, ge=0)
    stock: int = Field(0, ge=0)


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    compare_at_price: Optional[Decimal] = Field(None, ge=0)
    category_id: Optional[int] = None
    images: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    is_new: Optional[bool] = None
    is_trending: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_deal: Optional[bool] = None
    is_active: Optional[bool] = None
    stock: Optional[int] = Field(None, ge=0)
    tags: Optional[List[str]] = None
    material_info: Optional[str] = None
    care_instructions: Optional[str] = None


class ProductResponse(ProductBase):
    id: int
    slug: str
    price: float
    compare_at_price: Optional[float] = None
    stock: int
    rating: float = 0.0
    review_count: int = 0
    images: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecommendationsResponse(BaseModel):
    also_like: List[ProductResponse] = []
    pair_with: List[ProductResponse] = []

    class Config:
        from_attributes = True


class ProductDetailResponse(ProductResponse):
    category: Optional[CategoryResponse] = None
    reviews: List[ReviewResponse] = []
    recommendations: RecommendationsResponse

    class Config:
        from_attributes = True
