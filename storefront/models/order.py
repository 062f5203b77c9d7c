"""
Order models

Totals are computed server-side at creation. OrderItem.price is the unit price
captured at purchase time and is never re-read from the live product.
"""
import enum

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, JSON, Numeric

from storefront.core.database import Base
from storefront.core.utils import utcnow


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


# Legal status moves; cancelled and returned are terminal.
ORDER_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: {OrderStatus.RETURNED},
    OrderStatus.CANCELLED: set(),
    OrderStatus.RETURNED: set(),
}


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)  # null = guest
    session_id = Column(String, nullable=True, index=True)

    order_number = Column(String, unique=True, index=True, nullable=False)
    status = Column(String, default=OrderStatus.PENDING.value, nullable=False, index=True)

    # Pricing
    subtotal = Column(Numeric(10, 2), nullable=False)
    tax = Column(Numeric(10, 2), default=0, nullable=False)
    shipping = Column(Numeric(10, 2), default=0, nullable=False)
    discount = Column(Numeric(10, 2), default=0, nullable=False)
    total = Column(Numeric(10, 2), nullable=False)

    # Payment
    payment_method = Column(String)
    payment_status = Column(String, default=PaymentStatus.PENDING.value, nullable=False)

    # Shipping - embedded snapshot, not a live address reference
    shipping_address = Column(JSON, nullable=False)
    tracking_number = Column(String)
    estimated_delivery = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Order(id={self.id}, number={self.order_number}, status={self.status})>"


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # snapshot at purchase time
    size = Column(String)
    color = Column(String)

    created_at = Column(DateTime(timezone=True), default=utcnow)
