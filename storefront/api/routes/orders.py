"""
Order routes

Totals are always computed here on the server; see OrderService.create_order.
"""
from fastapi import APIRouter, Depends, Request, status

from storefront.api.deps import get_order_service
from storefront.core.config import settings
from storefront.core.rate_limit import limiter
from storefront.schemas.order import (
    OrderCreate,
    OrderDetailResponse,
    OrderList,
    OrderResponse,
    OrderStatusUpdate,
    PaymentStatusUpdate,
)
from storefront.services import OrderService

router = APIRouter()


@router.get("/user/{user_id}", response_model=OrderList)
async def list_orders(user_id: int, orders: OrderService = Depends(get_order_service)):
    """A user's orders, newest first"""
    user_orders = await orders.list_orders(user_id)
    return OrderList(orders=user_orders, total=len(user_orders))


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: int, orders: OrderService = Depends(get_order_service)):
    return await orders.get_order_detail(order_id)


@router.post("", response_model=OrderDetailResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_order(
    request: Request,
    order_data: OrderCreate,
    orders: OrderService = Depends(get_order_service),
):
    """Create an order from explicit items, or from the caller's cart when items are omitted"""
    order = await orders.create_order(
        shipping_address=order_data.shipping_address.model_dump(),
        user_id=order_data.user_id,
        session_id=order_data.session_id,
        items=[item.model_dump() for item in order_data.items] if order_data.items is not None else None,
        payment_method=order_data.payment_method,
        tax=order_data.tax,
        shipping=order_data.shipping,
        discount=order_data.discount,
        subtotal=order_data.subtotal,
        total=order_data.total,
    )
    return await orders.get_order_detail(order.id)


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    update_data: OrderStatusUpdate,
    orders: OrderService = Depends(get_order_service),
):
    return await orders.update_order_status(order_id, update_data.status)


@router.patch("/{order_id}/payment-status", response_model=OrderResponse)
async def update_payment_status(
    order_id: int,
    update_data: PaymentStatusUpdate,
    orders: OrderService = Depends(get_order_service),
):
    return await orders.update_payment_status(order_id, update_data.payment_status)
