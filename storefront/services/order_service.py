"""
Order Service

Orders are priced on the server. Every line snapshots the product's live
price at creation, the subtotal is recomputed from those snapshots, and
client-sent totals are only accepted when they agree with the server's.

Status moves follow ORDER_TRANSITIONS when ORDER_ENFORCE_TRANSITIONS is on;
with it off any known status is accepted.
"""
import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.core.utils import utcnow
from storefront.models import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    Product,
    ORDER_TRANSITIONS,
)
from storefront.services.cart_service import CartService, load_products
from storefront.services.entity_store import EntityStore
from storefront.services.identity import CartIdentity
from storefront.services.views import OrderDetail, OrderLine

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def generate_order_number(prefix: Optional[str] = None) -> str:
    """<PREFIX>-<YYYYMMDD>-<8 hex>, e.g. SNT-20240301-9F2C41AB"""
    prefix = prefix or settings.ORDER_NUMBER_PREFIX
    return f"{prefix}-{utcnow():%Y%m%d}-{uuid.uuid4().hex[:8].upper()}"


def to_money(value: Any) -> Decimal:
    return Decimal(str(value)).quantize(CENTS)


def parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise InvalidRequestError(f"Unknown order status '{value}' (expected one of: {allowed})", field="status")


def parse_payment_status(value: str) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in PaymentStatus)
        raise InvalidRequestError(
            f"Unknown payment status '{value}' (expected one of: {allowed})",
            field="payment_status",
        )


class OrderService:

    def __init__(self, db: AsyncSession, enforce_transitions: Optional[bool] = None):
        self.db = db
        self.orders = EntityStore(db, Order)
        self.order_items = EntityStore(db, OrderItem, "Order item")
        self.products = EntityStore(db, Product)
        self.enforce_transitions = (
            settings.ORDER_ENFORCE_TRANSITIONS if enforce_transitions is None else enforce_transitions
        )

    async def _unique_order_number(self) -> str:
        while True:
            number = generate_order_number()
            if await self.orders.find_one(Order.order_number == number) is None:
                return number
            logger.warning(f"Order number collision on {number}, regenerating")

    async def _price_lines(self, items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        lines = []
        for item in items:
            quantity = item.get("quantity", 1)
            if quantity is None or quantity < 1:
                raise InvalidRequestError("quantity must be at least 1", field="items.quantity")
            product = await self.products.get(item["product_id"])
            if product is None or not product.is_active:
                raise NotFoundError("Product", item["product_id"])
            lines.append({
                "product_id": product.id,
                "quantity": quantity,
                "price": to_money(product.price),
                "size": item.get("size"),
                "color": item.get("color"),
            })
        return lines

    async def create_order(
        self,
        shipping_address: Dict[str, Any],
        user_id: Optional[int] = None,
        session_id: Optional[str] = None,
        items: Optional[List[Dict[str, Any]]] = None,
        payment_method: Optional[str] = None,
        tax: Decimal = Decimal("0"),
        shipping: Decimal = Decimal("0"),
        discount: Decimal = Decimal("0"),
        subtotal: Optional[Decimal] = None,
        total: Optional[Decimal] = None,
    ) -> Order:
        identity = CartIdentity(user_id=user_id, session_id=session_id)
        from_cart = items is None
        cart = CartService(self.db)
        if from_cart:
            cart_rows = await cart.list_items(identity.require())
            await load_products(self.products, cart_rows, "Cart item")
            items = [
                {"product_id": row.product_id, "quantity": row.quantity, "size": row.size, "color": row.color}
                for row in cart_rows
            ]
        if not items:
            raise InvalidRequestError("An order needs at least one item", field="items")

        for name, amount in (("tax", tax), ("shipping", shipping), ("discount", discount)):
            if amount is not None and amount < 0:
                raise InvalidRequestError(f"{name} must not be negative", field=name)

        lines = await self._price_lines(items)
        computed_subtotal = sum((line["price"] * line["quantity"] for line in lines), Decimal("0"))
        computed_total = computed_subtotal + to_money(tax or 0) + to_money(shipping or 0) - to_money(discount or 0)
        computed_total = max(computed_total, Decimal("0")).quantize(CENTS)

        if subtotal is not None and to_money(subtotal) != computed_subtotal:
            raise InvalidRequestError(
                f"subtotal {subtotal} does not match computed subtotal {computed_subtotal}",
                field="subtotal",
            )
        if total is not None and to_money(total) != computed_total:
            raise InvalidRequestError(
                f"total {total} does not match computed total {computed_total}",
                field="total",
            )

        order = await self.orders.create(
            user_id=user_id,
            session_id=None if user_id is not None else session_id,
            order_number=await self._unique_order_number(),
            status=OrderStatus.PENDING.value,
            subtotal=computed_subtotal,
            tax=to_money(tax or 0),
            shipping=to_money(shipping or 0),
            discount=to_money(discount or 0),
            total=computed_total,
            payment_method=payment_method,
            payment_status=PaymentStatus.PENDING.value,
            shipping_address=shipping_address,
        )
        for line in lines:
            await self.order_items.create(order_id=order.id, **line)

        if from_cart:
            await cart.clear_cart(identity)

        logger.info(
            f"Order {order.order_number} created: {len(lines)} lines, total {computed_total} "
            f"({'cart' if from_cart else 'explicit items'})"
        )
        return order

    async def get_order(self, order_id: int) -> Order:
        return await self.orders.get_or_raise(order_id)

    async def get_order_detail(self, order_id: int) -> OrderDetail:
        order = await self.get_order(order_id)
        rows = await self.order_items.list(
            OrderItem.order_id == order.id,
            order_by=(OrderItem.id.asc(),),
        )
        products = await load_products(self.products, rows, "Order item")
        return OrderDetail(
            order=order,
            items=[OrderLine(item=row, product=products[row.product_id]) for row in rows],
        )

    async def list_orders(self, user_id: int) -> List[Order]:
        return await self.orders.list(
            Order.user_id == user_id,
            order_by=(Order.created_at.desc(), Order.id.desc()),
        )

    async def update_order_status(self, order_id: int, status: str) -> Order:
        new_status = parse_status(status)
        order = await self.get_order(order_id)
        current = OrderStatus(order.status)
        if new_status == current:
            return order
        if self.enforce_transitions and new_status not in ORDER_TRANSITIONS[current]:
            raise InvalidRequestError(
                f"Order {order.order_number} cannot move from {current.value} to {new_status.value}",
                field="status",
            )
        order = await self.orders.update(order_id, status=new_status.value)
        logger.info(f"Order {order.order_number} status: {current.value} -> {new_status.value}")
        return order

    async def update_payment_status(self, order_id: int, payment_status: str) -> Order:
        new_status = parse_payment_status(payment_status)
        order = await self.orders.update(order_id, payment_status=new_status.value)
        logger.info(f"Order {order.order_number} payment status: {new_status.value}")
        return order
