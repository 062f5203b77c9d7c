"""
Order schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field

from storefront.schemas.product import ProductResponse


class ShippingAddress(BaseModel):
    name: str
    phone: str
    address_line_1: str
    address_line_2: Optional[str] = None
    city: str
    state: str
    pincode: str
    country: str = "India"


class OrderItemCreate(BaseModel):
    product_id: int
    quantity: int = 1
    size: Optional[str] = None
    color: Optional[str] = None


class OrderCreate(BaseModel):
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    # Omitted -> the caller's current cart is ordered and then cleared.
    items: Optional[List[OrderItemCreate]] = None
    shipping_address: ShippingAddress
    payment_method: Optional[str] = None
    tax: Decimal = Field(Decimal("0"), ge=0)
    shipping: Decimal = Field(Decimal("0"), ge=0)
    discount: Decimal = Field(Decimal("0"), ge=0)
    # Client-computed totals are untrusted; a mismatch is rejected.
    subtotal: Optional[Decimal] = None
    total: Optional[Decimal] = None


class OrderStatusUpdate(BaseModel):
    status: str


class PaymentStatusUpdate(BaseModel):
    payment_status: str


class OrderItemResponse(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float
    size: Optional[str] = None
    color: Optional[str] = None

    class Config:
        from_attributes = True


class OrderLineResponse(OrderItemResponse):
    product: ProductResponse


class OrderResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    order_number: str
    status: str
    subtotal: float
    tax: float
    shipping: float
    discount: float
    total: float
    payment_method: Optional[str] = None
    payment_status: str
    shipping_address: Dict[str, Any]
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OrderDetailResponse(OrderResponse):
    items: List[OrderLineResponse]


class OrderList(BaseModel):
    orders: List[OrderResponse]
    total: int
